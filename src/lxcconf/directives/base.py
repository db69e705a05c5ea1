"""Base directive interface and parse context."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from lxcconf.errors import MissingContextError
from lxcconf.models.config import LoaderConfig
from lxcconf.models.container import ContainerConf
from lxcconf.models.network import NetDev


@dataclass
class ParseContext:
    """State carried across the lines of a single configuration file."""
    conf: ContainerConf
    settings: LoaderConfig = field(default_factory=LoaderConfig)
    netdev: Optional[NetDev] = None

    def __post_init__(self):
        # The head of the list is the most recently declared device
        if self.netdev is None and self.conf.network:
            self.netdev = self.conf.network[0]

    def open_netdev(self, netdev: NetDev) -> None:
        """Register a new device and make it the target of device directives."""
        self.conf.add_netdev(netdev)
        self.netdev = netdev

    def current_netdev(self, key: str, value: str) -> NetDev:
        """Return the open device or fail if no type directive was seen."""
        if self.netdev is None:
            raise MissingContextError(
                f"no network device defined for '{key}' = '{value}' option"
            )
        return self.netdev


class BaseDirective(ABC):
    """Base directive interface that all handlers must implement."""

    name: str = ""

    @abstractmethod
    def apply(self, key: str, value: str, context: ParseContext) -> None:
        """Apply a parsed ``key = value`` line to the context."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

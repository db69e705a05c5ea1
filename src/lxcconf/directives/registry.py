"""Directive registry mapping configuration keys to handlers."""

import logging
from typing import Dict, Iterable, Optional, Type

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.directives.cgroup import CgroupDirective
from lxcconf.directives.general import GENERAL_DIRECTIVES
from lxcconf.directives.mount import MOUNT_DIRECTIVES
from lxcconf.directives.network import NETWORK_DIRECTIVES
from lxcconf.errors import UnknownDirectiveError


logger = logging.getLogger(__name__)

DEFAULT_DIRECTIVES = [
    *GENERAL_DIRECTIVES,
    CgroupDirective,
    *MOUNT_DIRECTIVES,
    *NETWORK_DIRECTIVES,
]


class DirectiveRegistry:
    """Registry for directive handlers.

    A key resolves to the handler registered under exactly that name. If
    there is none, the handler with the longest name that is a prefix of
    the key is used, which is how ``lxc.cgroup.<subsystem>`` keys reach the
    ``lxc.cgroup`` handler. The result never depends on registration order.
    """

    def __init__(self, directive_classes: Optional[Iterable[Type[BaseDirective]]] = None):
        """Initialize directive registry."""
        self._directives: Dict[str, BaseDirective] = {}
        if directive_classes is None:
            directive_classes = DEFAULT_DIRECTIVES
        for directive_class in directive_classes:
            self.register(directive_class())

    def register(self, directive: BaseDirective) -> None:
        """Register a handler under its directive name."""
        if not directive.name:
            raise ValueError(f"{directive!r} has no directive name")
        if directive.name in self._directives:
            raise ValueError(f"Directive already registered: {directive.name}")
        self._directives[directive.name] = directive
        logger.debug(f"Registered directive: {directive.name}")

    def get_directive(self, name: str) -> Optional[BaseDirective]:
        """Get a handler by its exact name."""
        return self._directives.get(name)

    def resolve(self, key: str) -> BaseDirective:
        """Find the handler for a configuration key."""
        directive = self._directives.get(key)
        if directive is not None:
            return directive

        candidates = [name for name in self._directives if key.startswith(name)]
        if not candidates:
            raise UnknownDirectiveError(f"unknown key {key}")
        return self._directives[max(candidates, key=len)]

    def dispatch(self, key: str, value: str, context: ParseContext) -> None:
        """Resolve the key and apply the value through its handler."""
        directive = self.resolve(key)
        directive.apply(key, value, context)
        logger.debug(f"Applied {key} = {value} via {directive.name}")

    def list_directives(self) -> list[str]:
        """List registered directive names."""
        return sorted(self._directives)


def get_directive_registry() -> DirectiveRegistry:
    """Build a registry holding the standard directive set."""
    return DirectiveRegistry()

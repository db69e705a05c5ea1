"""Container configuration file loading."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from lxcconf.directives.base import ParseContext
from lxcconf.directives.registry import DirectiveRegistry, get_directive_registry
from lxcconf.errors import ConfigError, MalformedLineError, OversizedFieldError
from lxcconf.models.config import LoaderConfig
from lxcconf.models.container import MAXPATHLEN, ContainerConf
from lxcconf.utils.files import for_each_line
from lxcconf.utils.text import WHITESPACE, is_line_empty


logger = logging.getLogger(__name__)


def normalize_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a configuration line into a stripped ``(key, value)`` pair.

    Returns None for blank lines and comments. Raises MalformedLineError
    when the line has no '='.
    """
    if is_line_empty(line):
        return None

    line = line.lstrip(WHITESPACE)
    if line.startswith("#"):
        return None

    key, sep, value = line.partition("=")
    if not sep:
        raise MalformedLineError(f"invalid configuration line: {line}")

    return key.strip(WHITESPACE), value.strip(WHITESPACE)


class ConfigLoader:
    """Loads container configuration files into a ContainerConf."""

    def __init__(
        self,
        settings: Optional[LoaderConfig] = None,
        registry: Optional[DirectiveRegistry] = None,
    ):
        """Initialize configuration loader."""
        self.settings = settings or LoaderConfig()
        self.registry = registry or get_directive_registry()

    def parse_line(self, line: str, context: ParseContext) -> None:
        """Apply one line of a configuration file to the context."""
        if len(line) >= MAXPATHLEN:
            raise OversizedFieldError(f"configuration line is too long ({len(line)} characters)")

        directive = normalize_line(line)
        if directive is None:
            return

        key, value = directive
        self.registry.dispatch(key, value, context)

    def load(self, path: Union[str, Path], conf: ContainerConf) -> ContainerConf:
        """Read a configuration file into ``conf``.

        Stops at the first bad line. ``conf`` is left partially filled in
        that case and should be thrown away.
        """
        path = Path(path)
        context = ParseContext(conf=conf, settings=self.settings)
        logger.info(f"Loading container configuration from {path}")

        def _on_line(line: str, lineno: int) -> None:
            try:
                self.parse_line(line, context)
            except ConfigError as e:
                raise e.locate(path, lineno)

        try:
            for_each_line(path, _on_line)
        except ConfigError as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        logger.info(
            f"Loaded {path}: network devices={len(conf.network)} "
            f"cgroups={len(conf.cgroup)} mount entries={len(conf.mount_list)}"
        )
        return conf


def read_config(
    path: Union[str, Path],
    conf: ContainerConf,
    settings: Optional[LoaderConfig] = None,
) -> None:
    """Populate an existing ContainerConf from a configuration file.

    If ``conf`` already holds network devices, device directives that come
    before any ``lxc.network.type`` line apply to its most recent one.
    """
    ConfigLoader(settings=settings).load(path, conf)


def load_config(path: Union[str, Path], settings: Optional[LoaderConfig] = None) -> ContainerConf:
    """Load a configuration file into a new ContainerConf."""
    return ConfigLoader(settings=settings).load(path, ContainerConf())

"""Scalar directives: terminal counts, paths and hostname."""

import logging

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.errors import InvalidValueError, OversizedFieldError
from lxcconf.models.container import MAXPATHLEN, UTSNAME_LENGTH, Utsname
from lxcconf.utils.text import parse_int_lenient, parse_int_strict


logger = logging.getLogger(__name__)


def check_path(value: str) -> str:
    """Reject paths that do not fit in MAXPATHLEN."""
    if len(value) >= MAXPATHLEN:
        raise OversizedFieldError(f"{value} path is too long")
    return value


def parse_count(key: str, value: str, context: ParseContext) -> int:
    """Parse a terminal count, leniently unless strict_counts is set."""
    if not context.settings.strict_counts:
        return parse_int_lenient(value)
    try:
        return parse_int_strict(value)
    except ValueError:
        raise InvalidValueError(f"invalid count for {key}: {value}") from None


class PtsDirective(BaseDirective):
    name = "lxc.pts"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.pts = parse_count(key, value, context)


class TtyDirective(BaseDirective):
    name = "lxc.tty"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.tty = parse_count(key, value, context)


class RootfsDirective(BaseDirective):
    name = "lxc.rootfs"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.rootfs = check_path(value)


class PivotdirDirective(BaseDirective):
    name = "lxc.pivotdir"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.pivotdir = check_path(value)


class UtsnameDirective(BaseDirective):
    """Container hostname."""

    name = "lxc.utsname"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        if len(value) >= UTSNAME_LENGTH:
            raise OversizedFieldError(f"node name '{value}' is too long")
        context.conf.utsname = Utsname(nodename=value)
        logger.debug(f"Hostname set to {value}")


GENERAL_DIRECTIVES = [
    PtsDirective,
    TtyDirective,
    RootfsDirective,
    PivotdirDirective,
    UtsnameDirective,
]

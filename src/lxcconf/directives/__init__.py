"""Configuration directive handlers."""

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.directives.registry import DirectiveRegistry, get_directive_registry

__all__ = [
    "BaseDirective",
    "ParseContext",
    "DirectiveRegistry",
    "get_directive_registry",
]

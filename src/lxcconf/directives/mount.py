"""Mount directives."""

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.directives.general import check_path


class MountEntryDirective(BaseDirective):
    """One fstab formatted line, appended to the mount list."""

    name = "lxc.mount.entry"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.add_mount_entry(value)


class FstabDirective(BaseDirective):
    """Path to an external fstab file, the last one wins."""

    name = "lxc.mount"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.conf.fstab = check_path(value)


MOUNT_DIRECTIVES = [
    MountEntryDirective,
    FstabDirective,
]

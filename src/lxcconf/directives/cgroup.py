"""Control group directive."""

import logging

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.errors import MissingContextError
from lxcconf.models.container import CgroupSpec


logger = logging.getLogger(__name__)

CGROUP_TOKEN = "lxc.cgroup."


class CgroupDirective(BaseDirective):
    """``lxc.cgroup.<subsystem> = <value>``; matched by prefix."""

    name = "lxc.cgroup"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        _, token, subsystem = key.partition(CGROUP_TOKEN)
        if not token or not subsystem:
            raise MissingContextError(f"no cgroup subsystem in key '{key}'")

        context.conf.add_cgroup(CgroupSpec(subsystem=subsystem, value=value))
        logger.debug(f"Added cgroup constraint {subsystem}={value}")

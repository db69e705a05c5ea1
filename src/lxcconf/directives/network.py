"""Network device directives.

``lxc.network.type`` opens a new device; every other ``lxc.network.*``
directive updates the device opened last.
"""

import logging

from lxcconf.directives.base import BaseDirective, ParseContext
from lxcconf.errors import InvalidValueError, OversizedFieldError
from lxcconf.models.network import IFNAMSIZ, IFF_UP, NetDev, NetworkType
from lxcconf.utils.net import parse_inet4, parse_inet6


logger = logging.getLogger(__name__)


def _ifname(value: str) -> str:
    if len(value) > IFNAMSIZ:
        raise OversizedFieldError(f"invalid interface name: {value}")
    return value


class NetworkTypeDirective(BaseDirective):
    """Open a new network device."""

    name = "lxc.network.type"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        try:
            net_type = NetworkType(value)
        except ValueError:
            raise InvalidValueError(f"invalid network type {value}") from None

        context.open_netdev(NetDev(type=net_type))
        logger.debug(f"Opened {net_type.value} network device #{len(context.conf.network)}")


class NetworkFlagsDirective(BaseDirective):
    """Bring the device up."""

    name = "lxc.network.flags"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        netdev = context.current_netdev(key, value)
        if context.settings.strict_flags and value != "up":
            raise InvalidValueError(f"invalid network flags {value}")
        netdev.flags |= IFF_UP


class NetworkLinkDirective(BaseDirective):
    """Host interface the device is attached to."""

    name = "lxc.network.link"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        netdev = context.current_netdev(key, value)
        netdev.link = _ifname(value)


class NetworkNameDirective(BaseDirective):
    """Interface name inside the container."""

    name = "lxc.network.name"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        netdev = context.current_netdev(key, value)
        netdev.name = _ifname(value)


class NetworkHwaddrDirective(BaseDirective):
    name = "lxc.network.hwaddr"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        context.current_netdev(key, value).hwaddr = value


class NetworkMtuDirective(BaseDirective):
    name = "lxc.network.mtu"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        # Stored as text, not parsed
        context.current_netdev(key, value).mtu = value


class NetworkIPv4Directive(BaseDirective):
    """Add an ``addr[/prefix] [bcast]`` IPv4 address."""

    name = "lxc.network.ipv4"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        netdev = context.current_netdev(key, value)
        netdev.add_ipv4(parse_inet4(value))


class NetworkIPv6Directive(BaseDirective):
    """Add an ``addr[/prefix]`` IPv6 address."""

    name = "lxc.network.ipv6"

    def apply(self, key: str, value: str, context: ParseContext) -> None:
        netdev = context.current_netdev(key, value)
        netdev.add_ipv6(parse_inet6(value))


NETWORK_DIRECTIVES = [
    NetworkTypeDirective,
    NetworkFlagsDirective,
    NetworkLinkDirective,
    NetworkNameDirective,
    NetworkHwaddrDirective,
    NetworkMtuDirective,
    NetworkIPv4Directive,
    NetworkIPv6Directive,
]

"""IPv4/IPv6 address specification parsing."""

import logging
from ipaddress import IPv4Address, IPv6Address, AddressValueError
from typing import Optional

from lxcconf.errors import InvalidAddressError, InvalidValueError
from lxcconf.models.network import Inet4Dev, Inet6Dev
from lxcconf.utils.text import parse_int_lenient


logger = logging.getLogger(__name__)

IPV6_DEFAULT_PREFIX = 64


def class_prefix(addr: IPv4Address) -> int:
    """Return the classful network prefix for an address.

    Class A gives 8, class B 16, class C 24 and anything above (multicast,
    reserved) 0. This ignores CIDR entirely; it is the historical default
    when a configuration gives no prefix.
    """
    first_octet = addr.packed[0]
    if first_octet < 128:
        return 8
    if first_octet < 192:
        return 16
    if first_octet < 224:
        return 24
    return 0


def _ipv4(text: str, value: str) -> IPv4Address:
    try:
        return IPv4Address(text)
    except AddressValueError as e:
        raise InvalidAddressError(f"invalid ipv4 address: {value}: {e}") from e


def _prefix(text: Optional[str], maximum: int, value: str) -> Optional[int]:
    if text is None:
        return None
    prefix = parse_int_lenient(text)
    if not 0 <= prefix <= maximum:
        raise InvalidValueError(f"invalid prefix length {prefix} in '{value}' (0-{maximum})")
    return prefix


def parse_inet4(value: str) -> Inet4Dev:
    """Parse ``addr[/prefix] [bcast]`` into an IPv4 address record."""
    addr_text, space, bcast_text = value.partition(" ")
    addr_text, slash, prefix_text = addr_text.partition("/")

    addr = _ipv4(addr_text, value)
    bcast = _ipv4(bcast_text, value) if space else IPv4Address(0)

    prefix = _prefix(prefix_text if slash else None, 32, value)
    if prefix is None:
        prefix = class_prefix(addr)
        logger.debug(f"No prefix for {addr}, using classful prefix {prefix}")

    return Inet4Dev(addr=addr, bcast=bcast, prefix=prefix)


def parse_inet6(value: str) -> Inet6Dev:
    """Parse ``addr[/prefix]`` into an IPv6 address record."""
    addr_text, slash, prefix_text = value.partition("/")

    # Zone indexes have no place in the binary address
    if "%" in addr_text:
        raise InvalidAddressError(f"invalid ipv6 address: {value}: scope id not allowed")

    try:
        addr = IPv6Address(addr_text)
    except AddressValueError as e:
        raise InvalidAddressError(f"invalid ipv6 address: {value}: {e}") from e

    prefix = _prefix(prefix_text if slash else None, 128, value)
    if prefix is None:
        prefix = IPV6_DEFAULT_PREFIX

    return Inet6Dev(addr=addr, prefix=prefix)

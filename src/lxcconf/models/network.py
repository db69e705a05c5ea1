"""Network device models."""

from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import List, Optional
from pydantic import BaseModel, Field


# Kernel interface name buffer size
IFNAMSIZ = 16

# Interface flag bits
IFF_UP = 0x1


class NetworkType(str, Enum):
    """Kind of network device to set up for the container."""
    VETH = "veth"
    MACVLAN = "macvlan"
    PHYS = "phys"
    EMPTY = "empty"


class Inet4Dev(BaseModel):
    """IPv4 address assigned to a network device."""
    addr: IPv4Address = Field(..., description="Interface address")
    bcast: IPv4Address = Field(default=IPv4Address(0), description="Broadcast address")
    prefix: int = Field(..., ge=0, le=32)


class Inet6Dev(BaseModel):
    """IPv6 address assigned to a network device."""
    addr: IPv6Address = Field(..., description="Interface address")
    prefix: int = Field(default=64, ge=0, le=128)


class NetDev(BaseModel):
    """Network device specification."""
    type: NetworkType = Field(..., description="Device kind")
    flags: int = Field(default=0, ge=0)
    link: Optional[str] = Field(None, max_length=IFNAMSIZ, description="Host side link")
    name: Optional[str] = Field(None, max_length=IFNAMSIZ, description="Container side name")
    hwaddr: Optional[str] = None
    mtu: Optional[str] = None
    ipv4: List[Inet4Dev] = Field(default_factory=list)
    ipv6: List[Inet6Dev] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        extra = "forbid"

    @property
    def is_up(self) -> bool:
        """Whether the device is brought up administratively."""
        return bool(self.flags & IFF_UP)

    def add_ipv4(self, inetdev: Inet4Dev) -> None:
        """Append an IPv4 address, keeping declaration order."""
        self.ipv4.append(inetdev)

    def add_ipv6(self, inet6dev: Inet6Dev) -> None:
        """Append an IPv6 address, keeping declaration order."""
        self.ipv6.append(inet6dev)

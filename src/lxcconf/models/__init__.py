"""Pydantic models for the container configuration and the loader."""

from lxcconf.models.config import LoaderConfig
from lxcconf.models.container import ContainerConf, CgroupSpec, Utsname
from lxcconf.models.network import NetDev, NetworkType, Inet4Dev, Inet6Dev

__all__ = [
    "LoaderConfig",
    "ContainerConf",
    "CgroupSpec",
    "Utsname",
    "NetDev",
    "NetworkType",
    "Inet4Dev",
    "Inet6Dev",
]

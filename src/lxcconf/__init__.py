"""
lxcconf - lxc container configuration loader.

Reads ``key = value`` container configuration files (network devices,
addresses, cgroup constraints, mounts, hostname, terminal counts) into
pydantic models for container startup code to consume.
"""

__version__ = "1.0.0"
__author__ = "lxcconf Development Team"

# Re-export key components for easier access
from lxcconf.errors import ConfigError
from lxcconf.models.container import ContainerConf
from lxcconf.models.network import NetDev
from lxcconf.loader.confile import ConfigLoader, load_config, read_config

__all__ = [
    "ConfigError",
    "ContainerConf",
    "NetDev",
    "ConfigLoader",
    "load_config",
    "read_config",
]

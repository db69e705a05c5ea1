"""Container configuration models."""

from typing import List, Optional
from pydantic import BaseModel, Field

from lxcconf.models.network import NetDev


# Longest path accepted for rootfs, pivotdir and fstab
MAXPATHLEN = 4096

# Size of the platform nodename buffer, terminator included
UTSNAME_LENGTH = 65


class CgroupSpec(BaseModel):
    """Control group constraint."""
    subsystem: str = Field(..., description="Subsystem key, e.g. cpuset.cpus")
    value: str = Field(..., description="Value written to the subsystem key")


class Utsname(BaseModel):
    """Hostname seen inside the container."""
    nodename: str = Field(..., max_length=UTSNAME_LENGTH - 1)


class ContainerConf(BaseModel):
    """Everything a container configuration file declares.

    ``network`` holds the most recently declared device first; ``cgroup``
    and ``mount_list`` keep file order.
    """
    pts: int = Field(default=0)
    tty: int = Field(default=0)
    rootfs: Optional[str] = None
    pivotdir: Optional[str] = None
    fstab: Optional[str] = None
    utsname: Optional[Utsname] = None
    network: List[NetDev] = Field(default_factory=list)
    cgroup: List[CgroupSpec] = Field(default_factory=list)
    mount_list: List[str] = Field(default_factory=list)

    class Config:
        """Pydantic config."""
        extra = "forbid"

    def add_netdev(self, netdev: NetDev) -> None:
        """Insert a device at the head of the device list."""
        self.network.insert(0, netdev)

    def add_cgroup(self, cgroup: CgroupSpec) -> None:
        """Append a cgroup constraint."""
        self.cgroup.append(cgroup)

    def add_mount_entry(self, entry: str) -> None:
        """Append a mount table line."""
        self.mount_list.append(entry)

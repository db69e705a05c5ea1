"""Command implementations for CLI."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from lxcconf.directives.registry import DirectiveRegistry
from lxcconf.models.container import ContainerConf
from lxcconf.models.network import NetDev


console = Console()


def _text(value: Optional[str]) -> str:
    return value if value is not None else "[dim]-[/dim]"


def _addresses(netdev: NetDev) -> str:
    lines = []
    for inet in netdev.ipv4:
        line = f"{inet.addr}/{inet.prefix}"
        if int(inet.bcast):
            line += f" brd {inet.bcast}"
        lines.append(line)
    for inet6 in netdev.ipv6:
        lines.append(f"{inet6.addr}/{inet6.prefix}")
    return "\n".join(lines)


def show_config(conf: ContainerConf, path: Path):
    """Show a loaded configuration as tables."""
    table = Table(title=f"Container {path}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("utsname", _text(conf.utsname.nodename if conf.utsname else None))
    table.add_row("rootfs", _text(conf.rootfs))
    table.add_row("pivotdir", _text(conf.pivotdir))
    table.add_row("fstab", _text(conf.fstab))
    table.add_row("tty", str(conf.tty))
    table.add_row("pts", str(conf.pts))

    console.print(table)
    console.print()

    if conf.network:
        table = Table(title="Network Devices")
        table.add_column("#", style="dim")
        table.add_column("Type", style="magenta")
        table.add_column("Up")
        table.add_column("Link", style="cyan")
        table.add_column("Name", style="cyan")
        table.add_column("Hwaddr")
        table.add_column("MTU")
        table.add_column("Addresses")

        # Listed in declaration order; the model keeps the newest first
        for index, netdev in enumerate(reversed(conf.network), start=1):
            up = "[green]●[/green]" if netdev.is_up else "[red]○[/red]"
            table.add_row(
                str(index),
                netdev.type.value,
                up,
                _text(netdev.link),
                _text(netdev.name),
                _text(netdev.hwaddr),
                _text(netdev.mtu),
                _addresses(netdev),
            )

        console.print(table)
        console.print()

    if conf.cgroup:
        table = Table(title="Cgroups")
        table.add_column("Subsystem", style="cyan")
        table.add_column("Value")

        for cgroup in conf.cgroup:
            table.add_row(cgroup.subsystem, cgroup.value)

        console.print(table)
        console.print()

    if conf.mount_list:
        table = Table(title="Mount Entries")
        table.add_column("Entry")

        for entry in conf.mount_list:
            table.add_row(entry)

        console.print(table)


def validate_config(conf: ContainerConf, path: Path):
    """Report that a configuration loaded cleanly."""
    console.print(f"[green]✓[/green] Configuration {path} is valid")
    console.print(f"  Network devices: {len(conf.network)}")
    console.print(f"  Cgroups: {len(conf.cgroup)}")
    console.print(f"  Mount entries: {len(conf.mount_list)}")


def list_directives(registry: DirectiveRegistry):
    """List the directives the loader understands."""
    table = Table(title="Directives")
    table.add_column("Key", style="cyan")
    table.add_column("Handler", style="dim")

    for name in registry.list_directives():
        table.add_row(name, type(registry.get_directive(name)).__name__)

    console.print(table)

"""Tests for scalar, cgroup and mount directives."""

import pytest

from lxcconf.directives.base import ParseContext
from lxcconf.directives.registry import get_directive_registry
from lxcconf.errors import InvalidValueError, MissingContextError, OversizedFieldError
from lxcconf.models.config import LoaderConfig
from lxcconf.models.container import MAXPATHLEN, UTSNAME_LENGTH, ContainerConf


@pytest.fixture
def registry():
    """Standard directive registry."""
    return get_directive_registry()


@pytest.fixture
def context():
    """Fresh parse context."""
    return ParseContext(conf=ContainerConf())


class TestCounts:
    """Test lxc.pts and lxc.tty."""

    def test_numeric(self, registry, context):
        """Test plain numbers."""
        registry.dispatch("lxc.pts", "1024", context)
        registry.dispatch("lxc.tty", "4", context)

        assert context.conf.pts == 1024
        assert context.conf.tty == 4

    def test_non_numeric_is_zero(self, registry, context):
        """Test the lenient default."""
        context.conf.tty = 6
        registry.dispatch("lxc.tty", "many", context)

        assert context.conf.tty == 0

    def test_non_ascii_digits_are_zero(self, registry, context):
        """Test that only ASCII digits count as a number."""
        registry.dispatch("lxc.tty", "\u0663", context)

        assert context.conf.tty == 0

        strict = ParseContext(conf=ContainerConf(), settings=LoaderConfig(strict_counts=True))
        with pytest.raises(InvalidValueError):
            registry.dispatch("lxc.pts", "\u0663", strict)

    def test_strict_counts(self, registry):
        """Test that strict_counts rejects non-numeric values."""
        context = ParseContext(conf=ContainerConf(), settings=LoaderConfig(strict_counts=True))

        with pytest.raises(InvalidValueError):
            registry.dispatch("lxc.pts", "12abc", context)

        registry.dispatch("lxc.pts", "12", context)
        assert context.conf.pts == 12


class TestPaths:
    """Test lxc.rootfs, lxc.pivotdir and lxc.mount."""

    @pytest.mark.parametrize("key,attr", [
        ("lxc.rootfs", "rootfs"),
        ("lxc.pivotdir", "pivotdir"),
        ("lxc.mount", "fstab"),
    ])
    def test_overwrite(self, registry, context, key, attr):
        """Test that the last value wins."""
        registry.dispatch(key, "/first", context)
        registry.dispatch(key, "/second", context)

        assert getattr(context.conf, attr) == "/second"

    @pytest.mark.parametrize("key,attr", [
        ("lxc.rootfs", "rootfs"),
        ("lxc.pivotdir", "pivotdir"),
        ("lxc.mount", "fstab"),
    ])
    def test_too_long(self, registry, context, key, attr):
        """Test the MAXPATHLEN bound."""
        registry.dispatch(key, "/" + "p" * (MAXPATHLEN - 2), context)

        with pytest.raises(OversizedFieldError) as exc_info:
            registry.dispatch(key, "/" + "p" * (MAXPATHLEN - 1), context)

        assert "path is too long" in str(exc_info.value)
        assert len(getattr(context.conf, attr)) == MAXPATHLEN - 1


class TestUtsname:
    """Test lxc.utsname."""

    def test_hostname(self, registry, context):
        """Test setting and overwriting the hostname."""
        registry.dispatch("lxc.utsname", "web", context)
        registry.dispatch("lxc.utsname", "db", context)

        assert context.conf.utsname.nodename == "db"

    def test_too_long(self, registry, context):
        """Test the nodename length bound."""
        with pytest.raises(OversizedFieldError) as exc_info:
            registry.dispatch("lxc.utsname", "h" * UTSNAME_LENGTH, context)

        assert "is too long" in str(exc_info.value)
        assert context.conf.utsname is None


class TestCgroup:
    """Test lxc.cgroup.<subsystem>."""

    def test_subsystem(self, registry, context):
        """Test the subsystem is taken from the key."""
        registry.dispatch("lxc.cgroup.cpuset.cpus", "0-1", context)

        assert len(context.conf.cgroup) == 1
        assert context.conf.cgroup[0].subsystem == "cpuset.cpus"
        assert context.conf.cgroup[0].value == "0-1"

    def test_file_order(self, registry, context):
        """Test that constraints keep file order."""
        registry.dispatch("lxc.cgroup.devices.deny", "a", context)
        registry.dispatch("lxc.cgroup.devices.allow", "c 1:3 rwm", context)
        registry.dispatch("lxc.cgroup.devices.allow", "c 1:5 rwm", context)

        assert [(c.subsystem, c.value) for c in context.conf.cgroup] == [
            ("devices.deny", "a"),
            ("devices.allow", "c 1:3 rwm"),
            ("devices.allow", "c 1:5 rwm"),
        ]

    @pytest.mark.parametrize("key", ["lxc.cgroup", "lxc.cgroup.", "lxc.cgroupmemory"])
    def test_missing_subsystem(self, registry, context, key):
        """Test keys without a subsystem."""
        with pytest.raises(MissingContextError):
            registry.dispatch(key, "1", context)

        assert context.conf.cgroup == []


class TestMountEntry:
    """Test lxc.mount.entry."""

    def test_entries_appended(self, registry, context):
        """Test that entries are kept verbatim and in order."""
        registry.dispatch("lxc.mount.entry", "proc proc proc nodev,noexec,nosuid 0 0", context)
        registry.dispatch("lxc.mount.entry", "sysfs sys sysfs defaults  0 0", context)

        assert context.conf.mount_list == [
            "proc proc proc nodev,noexec,nosuid 0 0",
            "sysfs sys sysfs defaults  0 0",
        ]
        assert context.conf.fstab is None

"""Tests for line oriented file reading."""

from unittest.mock import Mock, call

import pytest

from lxcconf.errors import ConfigReadError
from lxcconf.utils.files import for_each_line


class TestForEachLine:
    """Test for_each_line."""

    def test_lines_and_numbers(self, tmp_path):
        """Test that each line is passed with its number."""
        config_file = tmp_path / "config"
        config_file.write_text("first\n  second  \r\nthird")
        callback = Mock()

        for_each_line(config_file, callback)

        assert callback.call_args_list == [
            call("first", 1),
            call("  second  ", 2),
            call("third", 3),
        ]

    def test_missing_file(self, tmp_path):
        """Test that I/O errors surface as ConfigReadError."""
        with pytest.raises(ConfigReadError) as exc_info:
            for_each_line(tmp_path / "missing", Mock())

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_callback_error_stops(self, tmp_path):
        """Test that a callback exception stops iteration."""
        config_file = tmp_path / "config"
        config_file.write_text("a\nb\nc\n")
        callback = Mock(side_effect=[None, RuntimeError("boom"), None])

        with pytest.raises(RuntimeError):
            for_each_line(config_file, callback)

        assert callback.call_count == 2

    def test_undecodable_bytes(self, tmp_path):
        """Test that non UTF-8 bytes do not abort reading."""
        config_file = tmp_path / "config"
        config_file.write_bytes(b"# caf\xe9\nlxc.tty = 2\n")
        callback = Mock()

        for_each_line(config_file, callback)

        assert callback.call_args_list[1] == call("lxc.tty = 2", 2)
        assert callback.call_args_list[0] == call("# caf\udce9", 1)

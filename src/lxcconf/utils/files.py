"""Line oriented file reading."""

import logging
from pathlib import Path
from typing import Callable, Union

from lxcconf.errors import ConfigReadError


logger = logging.getLogger(__name__)


def for_each_line(path: Union[str, Path], callback: Callable[[str, int], None]) -> None:
    """Call ``callback(line, lineno)`` for every line of a text file.

    Newlines are stripped; everything else is passed through untouched.
    Bytes that are not valid UTF-8 come through as lone surrogates, so
    they only fail a load if a handler rejects the value holding them.
    Exceptions raised by the callback propagate and stop the iteration.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise ConfigReadError(f"failed to read {file_path}: {e}") from e

    logger.debug(f"Read {len(content)} bytes from {file_path}")
    for lineno, line in enumerate(content.split("\n"), start=1):
        callback(line.rstrip("\r"), lineno)

"""Text helpers shared by the line normalizer and directive handlers."""

import re


# C locale isspace()
WHITESPACE = " \t\n\v\f\r"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_PLAIN_INT = re.compile(r"\d+", re.ASCII)


def is_line_empty(line: str) -> bool:
    """Return True if the line holds nothing but whitespace."""
    return not line.strip(WHITESPACE)


def parse_int_lenient(text: str) -> int:
    """Parse the leading decimal integer of ``text``, 0 if there is none.

    Leading whitespace and a sign are accepted and trailing garbage is
    ignored, so "12abc" gives 12 and "abc" gives 0. Only ASCII digits and
    whitespace count.
    """
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


def parse_int_strict(text: str) -> int:
    """Parse a plain non-negative decimal integer or raise ValueError."""
    if not _PLAIN_INT.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)

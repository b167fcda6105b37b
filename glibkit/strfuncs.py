"""Small string utilities: copying, case folding, splitting, joining and parsing."""

from __future__ import annotations

import math
import os
import re
import signal
from typing import Iterable, List, Optional, Tuple

STR_DELIMITERS = "_-|> <."

_C_SPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

_SPACE_RE = re.compile(r"[ \t\n\v\f\r]*")
_HEX_RE = re.compile(
    r"([+-]?)0[xX]((?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_DEC_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_RE = re.compile(
    r"([+-]?)(?:(infinity|inf)|(nan(?:\([0-9A-Za-z_]*\))?))", re.IGNORECASE
)


def _require(value: object, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


def strndup(string: Optional[str], n: int) -> Optional[str]:
    """Return at most the first ``n`` characters of ``string``; None stays None."""
    if string is None:
        return None
    if n < 0:
        raise ValueError("n must not be negative")
    return string[:n]


def strnfill(length: int, fill_char: str) -> str:
    """Return a string of ``length`` copies of ``fill_char``."""
    if len(fill_char) != 1:
        raise ValueError("fill_char must be a single character")
    if length < 0:
        raise ValueError("length must not be negative")
    return fill_char * length


def strtod(text: str) -> Tuple[float, int]:
    """Parse a leading floating-point number in the C locale.

    Returns the value and the index just past the characters consumed;
    when nothing could be parsed the result is ``(0.0, 0)``.
    """
    _require(text, "text")
    start = _SPACE_RE.match(text).end()

    hex_match = _HEX_RE.match(text, start)
    if hex_match:
        sign, body = hex_match.group(1), hex_match.group(2)
        value = float.fromhex(f"{sign}0x{body}")
        return value, hex_match.end()

    special = _SPECIAL_RE.match(text, start)
    if special:
        negative = special.group(1) == "-"
        if special.group(2):
            value = -math.inf if negative else math.inf
        else:
            value = -math.nan if negative else math.nan
        return value, special.end()

    dec_match = _DEC_RE.match(text, start)
    if dec_match:
        return float(dec_match.group(0)), dec_match.end()

    return 0.0, 0


def strdown(string: str) -> str:
    """Return ``string`` with ASCII letters lower-cased."""
    _require(string, "string")
    return string.translate(_ASCII_LOWER)


def strup(string: str) -> str:
    """Return ``string`` with ASCII letters upper-cased."""
    _require(string, "string")
    return string.translate(_ASCII_UPPER)


def strreverse(string: str) -> str:
    """Return ``string`` with its characters in reverse order."""
    _require(string, "string")
    return string[::-1]


def _fold(ch: str) -> int:
    return ord(ch.translate(_ASCII_LOWER))


def strcasecmp(s1: str, s2: str) -> int:
    """Compare two strings ignoring ASCII case; the sign gives the order."""
    _require(s1, "s1")
    _require(s2, "s2")
    for c1, c2 in zip(s1, s2):
        diff = _fold(c1) - _fold(c2)
        if diff:
            return diff
    common = min(len(s1), len(s2))
    tail1 = ord(s1[common]) if len(s1) > common else 0
    tail2 = ord(s2[common]) if len(s2) > common else 0
    return tail1 - tail2


def strncasecmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings ignoring ASCII case."""
    _require(s1, "s1")
    _require(s2, "s2")
    if n <= 0:
        return 0
    for c1, c2 in zip(s1[:n], s2[:n]):
        diff = _fold(c1) - _fold(c2)
        if diff:
            return diff
    common = min(len(s1), len(s2), n)
    if common == n:
        return 0
    tail1 = ord(s1[common]) if len(s1) > common else 0
    tail2 = ord(s2[common]) if len(s2) > common else 0
    return tail1 - tail2


def strdelimit(string: str, delimiters: Optional[str] = None, new_delim: str = "_") -> str:
    """Replace every character found in ``delimiters`` with ``new_delim``."""
    _require(string, "string")
    if len(new_delim) != 1:
        raise ValueError("new_delim must be a single character")
    if delimiters is None:
        delimiters = STR_DELIMITERS
    wanted = set(delimiters)
    return "".join(new_delim if ch in wanted else ch for ch in string)


def strescape(string: str) -> str:
    """Return ``string`` with every backslash doubled."""
    _require(string, "string")
    return string.replace("\\", "\\\\")


def strchug(string: str) -> str:
    """Remove leading whitespace."""
    _require(string, "string")
    return string.lstrip(_C_SPACE)


def strchomp(string: str) -> str:
    """Remove trailing whitespace."""
    _require(string, "string")
    return string.rstrip(_C_SPACE)


def strsplit(string: str, delimiter: str, max_tokens: int = 0) -> List[str]:
    """Split ``string`` at ``delimiter``.

    At most ``max_tokens`` delimiters are split on (all of them when
    ``max_tokens`` is below 1); whatever follows the last split is added as a
    final piece unless it is empty.
    """
    _require(string, "string")
    _require(delimiter, "delimiter")
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    remaining = max_tokens if max_tokens >= 1 else None
    pieces: List[str] = []
    start = 0
    pos = string.find(delimiter)
    while pos >= 0:
        pieces.append(string[start:pos])
        start = pos + len(delimiter)
        pos = string.find(delimiter, start)
        if remaining is not None:
            remaining -= 1
            if remaining == 0:
                break
    rest = string[start:]
    if rest:
        pieces.append(rest)
    return pieces


def strjoinv(separator: Optional[str], str_array: Iterable[str]) -> str:
    """Join the strings of ``str_array`` with ``separator`` (None means none)."""
    _require(str_array, "str_array")
    return (separator or "").join(str_array)


def strjoin(separator: Optional[str], *args: str) -> str:
    """Join the given strings with ``separator`` (None means none)."""
    return (separator or "").join(args)


def strerror(errnum: int) -> str:
    """Return the description of an error number."""
    try:
        message = os.strerror(errnum)
    except (ValueError, OverflowError):
        message = None
    return message if message else f"unknown error ({errnum})"


def strsignal(signum: int) -> str:
    """Return the description of a signal number."""
    try:
        message = signal.strsignal(signum)
    except (ValueError, OverflowError):
        message = None
    return message if message else f"unknown signal ({signum})"
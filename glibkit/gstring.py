"""String hashing, string chunks and a growable mutable string."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

_MASK32 = 0xFFFFFFFF
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _signed_bytes(key: Union[str, bytes]) -> List[int]:
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    return [b - 256 if b > 127 else b for b in data]


def str_hash(key: Union[str, bytes]) -> int:
    """Return the 32-bit ``h * 31 + c`` hash of a string."""
    chars = _signed_bytes(key)
    if not chars:
        return 0
    h = chars[0] & _MASK32
    for c in chars[1:]:
        h = ((h << 5) - h + c) & _MASK32
    return h


def str_equal(a: Any, b: Any) -> bool:
    """Return whether two strings are equal."""
    return a == b


def _nearest_pow(num: int) -> int:
    n = 1
    while n < num:
        n <<= 1
    return n


class StringChunk:
    """A store of strings, with optional de-duplication of equal strings."""

    def __init__(self, default_size: int) -> None:
        self.default_size = _nearest_pow(default_size)
        self._storage: List[str] = []
        self._const: Optional[Dict[str, str]] = None

    def insert(self, string: str) -> str:
        """Store a copy of ``string`` and return it."""
        stored = "".join(list(string))
        self._storage.append(stored)
        return stored

    def insert_const(self, string: str) -> str:
        """Return the stored copy equal to ``string``, storing one if there is none."""
        if self._const is None:
            self._const = {}
        stored = self._const.get(string)
        if stored is None:
            stored = self.insert(string)
            self._const[stored] = stored
        return stored

    def __len__(self) -> int:
        return len(self._storage)


class StringBuffer:
    """A mutable string whose edits return the buffer itself."""

    def __init__(self, init: Optional[str] = None) -> None:
        self._text = init if init is not None else ""

    def assign(self, value: str) -> "StringBuffer":
        """Replace the contents with ``value``."""
        if value is None:
            raise TypeError("value must be a string")
        self._text = value
        return self

    def truncate(self, length: int) -> "StringBuffer":
        """Cut the contents down to ``length`` characters."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._text = self._text[:length]
        return self

    def append(self, value: str) -> "StringBuffer":
        """Add ``value`` at the end."""
        self._text += value
        return self

    def prepend(self, value: str) -> "StringBuffer":
        """Add ``value`` at the front."""
        self._text = value + self._text
        return self

    def insert(self, pos: int, value: str) -> "StringBuffer":
        """Insert ``value`` before position ``pos``."""
        if not 0 <= pos <= len(self._text):
            raise IndexError(f"position {pos} out of range")
        self._text = self._text[:pos] + value + self._text[pos:]
        return self

    def erase(self, pos: int, length: int) -> "StringBuffer":
        """Remove ``length`` characters starting at ``pos``."""
        if length < 0:
            raise ValueError("length must not be negative")
        if pos < 0 or pos > len(self._text) or pos + length > len(self._text):
            raise IndexError(f"range {pos}+{length} out of range")
        self._text = self._text[:pos] + self._text[pos + length:]
        return self

    def down(self) -> "StringBuffer":
        """Lower-case ASCII letters in place."""
        self._text = self._text.translate(_ASCII_LOWER)
        return self

    def up(self) -> "StringBuffer":
        """Upper-case ASCII letters in place."""
        self._text = self._text.translate(_ASCII_UPPER)
        return self

    def sprintf(self, fmt: str, *args: Any) -> "StringBuffer":
        """Replace the contents with ``fmt`` formatted printf-style."""
        self._text = fmt % args
        return self

    def sprintfa(self, fmt: str, *args: Any) -> "StringBuffer":
        """Append ``fmt`` formatted printf-style."""
        self._text += fmt % args
        return self

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringBuffer):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StringBuffer({self._text!r})"
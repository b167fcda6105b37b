"""An upper bound on the length of printf-style output, computed without formatting."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Any, Callable

from .strfuncs import strerror

logger = logging.getLogger(__name__)

_IEEE754_DOUBLE_BIAS = 1023
_LOG_2_BASE_10 = 0.30102999566398119521
_MB_LEN_MAX = 16
_SAFETY_PADDING = 1024
# Longs, pointers, size_t, ptrdiff_t and intmax_t are all taken to be 64 bits wide.
_HONOUR_LONGS = True
_DIGITS = "0123456789"


@dataclass
class _Spec:
    min_width: int = 0
    precision: int = 0
    alternate_format: bool = False
    zero_padding: bool = False
    adjust_left: bool = False
    locale_grouping: bool = False
    add_space: bool = False
    add_sign: bool = False
    possible_sign: bool = False
    seen_precision: bool = False
    mod_half: bool = False
    mod_long: bool = False
    mod_extra_long: bool = False


def _biased_exponent(value: float) -> int:
    bits = struct.unpack(">Q", struct.pack(">d", value))[0]
    return (bits >> 52) & 0x7FF


def _string_length(value: Any) -> int:
    if isinstance(value, str):
        return len(value.encode("utf-8"))
    return len(value)


def _arg_taker(args: tuple) -> Callable[[str], Any]:
    remaining = iter(args)

    def take(kind: str) -> Any:
        try:
            return next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string (missing {kind})") from None

    return take


def printf_string_upper_bound(format: str | None, *args: Any) -> int:
    """Return a size, counting the terminating NUL, that formatting cannot exceed."""
    length = 1
    if format is None:
        return length
    format = format.split("\0", 1)[0]
    take = _arg_taker(args)
    end = len(format)
    pos = 0

    while pos < end:
        c = format[pos]
        pos += 1
        if c != "%":
            length += 1
            continue

        spec = _Spec()
        seen_l = False
        conv_done = False
        conv_len = 0
        spec_start = pos

        while not conv_done:
            c = format[pos] if pos < end else "\0"
            pos += 1

            if c == "\0":
                # no conversion specification at all
                conv_len += pos - spec_start
            elif c == "$":
                logger.warning(
                    "printf_string_upper_bound(): unable to handle positional parameters (%%n$)"
                )
                length += _SAFETY_PADDING
            elif c == "#":
                spec.alternate_format = True
            elif c == "0":
                spec.zero_padding = True
            elif c == "-":
                spec.adjust_left = True
            elif c == " ":
                spec.add_space = True
            elif c == "+":
                spec.add_sign = True
            elif c == "'":
                spec.locale_grouping = True
            elif c == ".":
                spec.seen_precision = True
            elif c in "123456789":
                number = int(c)
                while pos < end and format[pos] in _DIGITS:
                    number = number * 10 + int(format[pos])
                    pos += 1
                if spec.seen_precision:
                    spec.precision = max(spec.precision, number)
                else:
                    spec.min_width = max(spec.min_width, number)
            elif c == "*":
                value = take("width or precision")
                try:
                    number = int(value)
                except (TypeError, ValueError) as exc:
                    raise TypeError("* wants an integer") from exc
                if spec.seen_precision:
                    if number >= 0:
                        spec.precision = max(spec.precision, number)
                else:
                    if number < 0:
                        number = -number
                        spec.adjust_left = True
                    spec.min_width = max(spec.min_width, number)
            elif c == "h":
                spec.mod_half = True
            elif c == "l" and not seen_l:
                spec.mod_long = True
                seen_l = True
            elif c in "lLqzZtj":
                spec.mod_long = True
                spec.mod_extra_long = True
            elif c == "%":
                conv_len += 1
            elif c in "ODIUoduixX":
                if c in "ODIU":
                    spec.mod_long = True
                if c in "ODIUo":
                    conv_len += 2
                if c in "ODIUodi":
                    conv_len += 1
                if c in "ODIUodiu":
                    conv_len += 4
                spec.possible_sign = True
                conv_len += 10
                if spec.mod_long and _HONOUR_LONGS:
                    conv_len *= 2
                if spec.mod_extra_long:
                    conv_len *= 2
                take("integer")
            elif c in "AagGeEf":
                if c in "Aa":
                    conv_len += 2
                spec.possible_sign = True
                conv_len += 1 + 1 + max(24, spec.precision) + 1 + 1 + 4
                if spec.mod_extra_long:
                    logger.warning(
                        "printf_string_upper_bound(): unable to handle long double, "
                        "collecting double only"
                    )
                raw = take("float")
                try:
                    value = float(raw)
                except (TypeError, ValueError) as exc:
                    raise TypeError(f"a number is required, not {type(raw).__name__}") from exc
                exponent = _biased_exponent(value)
                if c == "f" and 0 < exponent < 2047:
                    exponent -= _IEEE754_DOUBLE_BIAS
                    conv_len += abs(int(exponent * _LOG_2_BASE_10)) + 1
                conv_len += 2
                if spec.locale_grouping:
                    conv_len *= 2
            elif c in "Cc":
                if c == "C":
                    spec.mod_long = True
                conv_len += _MB_LEN_MAX if spec.mod_long else 1
                take("character")
            elif c in "Ss":
                if c == "S":
                    spec.mod_long = True
                value = take("string")
                if value is None:
                    conv_len += 8  # room for "(null)"
                elif spec.seen_precision:
                    conv_len += spec.precision
                else:
                    conv_len += _string_length(value)
                conv_done = True
                if spec.mod_long:
                    logger.warning(
                        "printf_string_upper_bound(): unable to handle wide char strings"
                    )
                    length += _SAFETY_PADDING
            elif c in "Ppn":
                if c in "Pp":
                    spec.alternate_format = True
                    conv_len += 10
                    if _HONOUR_LONGS:
                        conv_len *= 2
                conv_done = True
                take("pointer")
            elif c == "m":
                message = strerror(0)
                conv_len += max(256, len(message) if message else 0)
            else:
                logger.warning(
                    "printf_string_upper_bound(): unable to handle `%s' while parsing format", c
                )

            conv_done = conv_done or conv_len > 0

        conv_len = max(conv_len, spec.precision, spec.min_width)
        conv_len += 2 if spec.alternate_format else 0
        conv_len += 1 if (spec.add_space or spec.add_sign or spec.possible_sign) else 0
        length += conv_len

    return length
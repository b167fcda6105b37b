import errno
import math
import os
import signal

import pytest

from glibkit import strfuncs


def test_strndup_prefix():
    assert strfuncs.strndup("el dorado ", 5) == "el do"


def test_strndup_longer_than_string_and_none():
    assert strfuncs.strndup("el do", 50) == "el do"
    assert strfuncs.strndup(None, 3) is None


def test_strnfill_invariants():
    filled = strfuncs.strnfill(7, "z")
    assert len(filled) == 7
    assert set(filled) == {"z"}
    assert strfuncs.strnfill(0, "z") == ""


def test_strnfill_rejects_multi_char():
    with pytest.raises(ValueError):
        strfuncs.strnfill(3, "ab")


def test_strtod_whole_string():
    text = "666.666666666"
    value, end = strfuncs.strtod(text)
    assert value == float(text)
    assert end == len(text)


def test_strtod_stops_at_garbage():
    text = "  -2.5e2xyz"
    value, end = strfuncs.strtod(text)
    assert value == float("-2.5e2")
    assert text[end:] == "xyz"


def test_strtod_nothing_parsed():
    value, end = strfuncs.strtod("hi pete")
    assert value == 0.0
    assert end == 0


def test_strtod_hex_and_specials():
    value, end = strfuncs.strtod("0x1.8p1")
    assert value == float.fromhex("0x1.8p1")
    assert end == len("0x1.8p1")
    inf_value, _ = strfuncs.strtod("-infinity")
    assert math.isinf(inf_value) and inf_value < 0
    nan_value, nan_end = strfuncs.strtod("nan rest")
    assert math.isnan(nan_value)
    assert nan_end == len("nan")


def test_strtod_bare_hex_prefix_parses_zero():
    value, end = strfuncs.strtod("0xg")
    assert value == 0.0
    assert end == 1


def test_strdown_and_strup_ascii_only():
    text = "Hi Pete! É"
    assert strfuncs.strdown(text) == "hi pete! É"
    assert strfuncs.strup(strfuncs.strdown(text)) == strfuncs.strup(text)
    assert "É" in strfuncs.strdown(text)


def test_strreverse_round_trip():
    text = "el dorado "
    reversed_text = strfuncs.strreverse(text)
    assert strfuncs.strreverse(reversed_text) == text
    assert reversed_text[0] == text[-1]
    assert strfuncs.strreverse("") == ""


def test_strreverse_none_raises():
    with pytest.raises(TypeError):
        strfuncs.strreverse(None)


def test_strcasecmp():
    assert strfuncs.strcasecmp("Hi Pete", "hI pETE") == 0
    assert strfuncs.strcasecmp("apple", "Banana") < 0
    assert strfuncs.strcasecmp("Banana", "apple") > 0
    assert strfuncs.strcasecmp("abc", "ab") > 0
    assert strfuncs.strcasecmp("ab", "abc") < 0


def test_strncasecmp():
    assert strfuncs.strncasecmp("abcX", "ABCY", 3) == 0
    assert strfuncs.strncasecmp("abcX", "ABCY", 4) < 0
    assert strfuncs.strncasecmp("ab", "abc", 5) < 0
    assert strfuncs.strncasecmp("anything", "other", 0) == 0


def test_strdelimit_default_delimiters():
    result = strfuncs.strdelimit("a-b_c|d>e f<g.h", None, "+")
    assert not any(ch in strfuncs.STR_DELIMITERS for ch in result)
    assert result.count("+") == 7
    assert result.replace("+", "") == "abcdefgh"


def test_strdelimit_custom():
    result = strfuncs.strdelimit("el dorado ", "o", "0")
    assert "o" not in result
    assert len(result) == len("el dorado ")


def test_strescape_doubles_backslashes():
    text = "a\\b\\c"
    escaped = strfuncs.strescape(text)
    assert escaped.count("\\") == 2 * text.count("\\")
    assert escaped.replace("\\\\", "\\") == text
    assert strfuncs.strescape("plain") == "plain"


def test_strchug_and_strchomp():
    text = " \t el dorado \n"
    assert strfuncs.strchug(text) == "el dorado \n"
    assert strfuncs.strchomp(text) == " \t el dorado"
    assert strfuncs.strchomp(strfuncs.strchug(text)) == "el dorado"


def test_strsplit_round_trip():
    text = "a,bb,,ccc"
    parts = strfuncs.strsplit(text, ",")
    assert len(parts) == 4
    assert strfuncs.strjoinv(",", parts) == text


def test_strsplit_drops_empty_tail():
    parts = strfuncs.strsplit("a,b,", ",")
    assert parts == ["a", "b"]
    assert strfuncs.strsplit("", ",") == []


def test_strsplit_max_tokens():
    parts = strfuncs.strsplit("a::b::c", "::", 1)
    assert parts == ["a", "b::c"]


def test_strsplit_empty_delimiter():
    with pytest.raises(ValueError):
        strfuncs.strsplit("abc", "")


def test_strjoin_and_strjoinv():
    assert strfuncs.strjoin("|", "hi", "pete") == "hi|pete"
    assert strfuncs.strjoin(None, "hi", "pete") == "hipete"
    assert strfuncs.strjoin(",") == ""
    assert strfuncs.strjoinv(None, []) == ""
    with pytest.raises(TypeError):
        strfuncs.strjoinv(",", None)


def test_strerror_known_and_unknown():
    assert strfuncs.strerror(errno.ENOENT) == os.strerror(errno.ENOENT)
    assert strfuncs.strerror(errno.ENOENT)


def test_strsignal_known_and_unknown():
    assert strfuncs.strsignal(signal.SIGINT) == signal.strsignal(signal.SIGINT)
    assert strfuncs.strsignal(100000) == "unknown signal (100000)"
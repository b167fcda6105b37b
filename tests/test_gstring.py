import pytest

from glibkit.gstring import StringBuffer, StringChunk, str_equal, str_hash


def test_str_hash_values():
    assert str_hash("") == 0
    assert str_hash("a") == 97
    assert str_hash("ab") == 3105
    assert str_hash("hi") == 3329


def test_str_hash_fits_32_bits():
    assert 0 <= str_hash("x" * 1000) <= 0xFFFFFFFF


def test_str_hash_bytes_and_str_agree():
    assert str_hash("hello") == str_hash(b"hello")


def test_str_equal():
    assert str_equal("abc", "abc")
    assert not str_equal("abc", "abd")


def test_chunk_insert_many():
    chunk = StringChunk(1024)
    stored = None
    for _ in range(100000):
        stored = chunk.insert("hi pete")
        assert stored == "hi pete"
    assert len(chunk) == 100000


def test_chunk_insert_const_dedups():
    chunk = StringChunk(1024)
    plain = chunk.insert("hi pete")
    first = chunk.insert_const(plain)
    assert first == plain
    second = chunk.insert_const(plain)
    assert second is first
    assert len(chunk) == 2


def test_chunk_default_size_rounds_to_power_of_two():
    assert StringChunk(1000).default_size == 1024
    assert StringChunk(1).default_size == 1


def test_new_strings():
    string1 = StringBuffer("hi pete!")
    string2 = StringBuffer("")
    assert len(string1) == 8
    assert len(string2) == 0
    assert str(string1) == "hi pete!"
    assert str(string2) == ""
    assert str(StringBuffer()) == ""


def test_append_many_chars():
    string1 = StringBuffer("hi pete!")
    for i in range(10000):
        string1.append(chr(ord("a") + i % 26))
    assert len(string1) == len("hi pete!") + 10000
    assert len(str(string1)) == len("hi pete!") + 10000


def test_sprintfa_appends():
    s = StringBuffer("x=")
    s.sprintfa("%d", 5)
    assert str(s) == "x=5"
    s.sprintf("%s", "y")
    assert str(s) == "y"


def test_assign_and_truncate():
    s = StringBuffer("hello")
    assert str(s.assign("world")) == "world"
    assert str(s.truncate(3)) == "wor"
    with pytest.raises(ValueError):
        s.truncate(-1)


def test_prepend_and_insert():
    s = StringBuffer("cd")
    s.prepend("ab").insert(4, "ef").insert(2, "-")
    assert str(s) == "ab-cdef"
    with pytest.raises(IndexError):
        s.insert(100, "z")
    with pytest.raises(IndexError):
        s.insert(-1, "z")


def test_erase():
    s = StringBuffer("abcdef")
    s.erase(1, 2)
    assert str(s) == "adef"
    s.erase(2, 2)
    assert str(s) == "ad"
    with pytest.raises(IndexError):
        s.erase(1, 5)
    with pytest.raises(ValueError):
        s.erase(0, -1)


def test_up_and_down_ascii_only():
    s = StringBuffer("Hello Wörld")
    assert str(s.up()) == "HELLO WöRLD"
    assert str(s.down()) == "hello wörld"


def test_equality():
    assert StringBuffer("abc") == StringBuffer("abc")
    assert StringBuffer("abc") == "abc"
    assert not StringBuffer("abc") == "abd"
import pytest

from libftplus.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen():
    assert strlen("hello") == 5
    assert strlen("") == 0


def test_strchr_finds_first():
    assert strchr("hello", "l") == 2
    assert strchr("hello", ord("e")) == 1


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last():
    assert strrchr("hello", "l") == 3
    assert strrchr("hello", "z") is None
    assert strrchr("hello", 0) == len("hello")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("a", "b", 0) == 0


def test_strncmp_differences():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_stops_after_end():
    assert strncmp("same", "same", 100) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


def test_strnstr_found():
    big = "foo bar baz"
    assert strnstr(big, "bar", len(big)) == big.index("bar")


def test_strnstr_outside_length():
    assert strnstr("foo bar", "bar", 6) is None
    assert strnstr("foo bar", "qux", 7) is None


def test_strnstr_empty_little():
    assert strnstr("anything", "", 0) == 0


def test_strdup_round_trip():
    assert strdup("copy me") == "copy me"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 10, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim(" a b ", "") == " a b "
    assert strtrim("-a-b-", "-") == "a-b"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_no_separator_present():
    assert split("word", ",") == ["word"]
    assert split("word", "\0") == ["word"]


def test_split_join_round_trip():
    text = "a,bb,ccc"
    assert ",".join(split(text, ",")) == text


def test_strmapi():
    assert strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbC"
    assert strmapi("", lambda i, ch: ch) == ""


def test_striteri_list():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i < 2 else None)
    assert chars == ["A", "B", "c", "d"]


def test_striteri_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, b: b - 32)
    assert data == bytearray(b"ABC")


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, ch: ch)


def test_strlcpy_full_copy():
    buf = bytearray(10)
    assert strlcpy(buf, b"hello", 10) == 5
    assert buf[:6] == b"hello\0"


def test_strlcpy_truncates():
    buf = bytearray(b"zzzzzz")
    assert strlcpy(buf, b"hello", 3) == 5
    assert buf[:3] == b"he\0"


def test_strlcpy_size_zero_untouched():
    buf = bytearray(b"keep")
    assert strlcpy(buf, b"hello", 0) == 5
    assert buf == bytearray(b"keep")


def test_strlcpy_size_too_large():
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), b"hello", 5)


def test_strlcat_appends():
    buf = bytearray(b"ab" + bytes(8))
    assert strlcat(buf, b"cd", 10) == 4
    assert buf[:5] == b"abcd\0"


def test_strlcat_truncates():
    buf = bytearray(b"ab" + bytes(8))
    assert strlcat(buf, b"cdef", 4) == 6
    assert buf[:4] == b"abc\0"


def test_strlcat_size_not_beyond_dst():
    buf = bytearray(b"abc" + bytes(5))
    assert strlcat(buf, b"de", 2) == len(b"de") + 2
    assert buf[:4] == b"abc\0"


def test_strlcat_size_zero():
    buf = bytearray(b"ab\0")
    assert strlcat(buf, b"xyz", 0) == 3


def test_strlcat_rejects_readonly():
    with pytest.raises(TypeError):
        strlcat(b"ab\0\0\0", b"c", 4)
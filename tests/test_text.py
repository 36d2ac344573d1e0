import pytest

from minishell.text import (
    atoi,
    itoa,
    split,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_simple():
    assert atoi("42") == 42


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-123abc") == -123
    assert atoi("+77") == 77


def test_atoi_double_sign_stops():
    assert atoi("+-5") == 0


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


def test_atoi_overflow_marker():
    assert atoi("99999999999999") == -2


@pytest.mark.parametrize("n", [0, 1, -1, 9, -10, 12345, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_special_cases():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_split_drops_empty_pieces():
    assert split(",,a,,bc,", ",") == ["a", "bc"]
    assert split("", ",") == []
    assert split("abc", ",") == ["abc"]


def test_split_pieces_never_contain_separator():
    pieces = split("ls -l  -a   /tmp", " ")
    assert all(piece and " " not in piece for piece in pieces)
    assert "".join(pieces) == "ls -l  -a   /tmp".replace(" ", "")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", "")
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("aaa", "a") == ""
    assert strtrim(" ab ", "") == " ab "
    assert strtrim(" ab ", None) == " ab "


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hi", 5, 2) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_match_is_within_bounds():
    haystack = "hello world"
    index = strnstr(haystack, "world", len(haystack))
    assert haystack[index:index + len("world")] == "world"


def test_strnstr_limits():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "c", 2) is None
    assert strnstr("abc", "a", 0) is None
    assert strnstr("abc", "zz", 3) is None


def test_strncmp():
    assert strncmp("abc", "abc", 5) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("exit", "exit", 5) == 0
    assert strncmp("exitx", "exit", 5) > 0


def test_strchr():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]
    assert strchr(text, "z") is None
    assert strchr(text, "\0") == len(text)


def test_strrchr():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))
    assert strlcpy("hello", 50) == ("hello", len("hello"))


def test_strlcat():
    assert strlcat("ab", "cd", 10) == ("abcd", len("ab") + len("cd"))
    assert strlcat("ab", "cdef", 4) == ("abc", len("ab") + len("cdef"))
    assert strlcat("abcd", "ef", 2) == ("abcd", 2 + len("ef"))


def test_strmapi():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi("", lambda i, c: c) == ""
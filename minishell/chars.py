"""Classification and case conversion of ASCII character codes."""

from __future__ import annotations

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def isalpha(code: int) -> bool:
    """True for the codes of ASCII letters."""
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def isdigit(code: int) -> bool:
    """True for the codes of the decimal digits."""
    return _DIGIT_0 <= code <= _DIGIT_9


def isalnum(code: int) -> bool:
    """True for the codes of ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: int) -> bool:
    """True for codes in the 7-bit ASCII range."""
    return 0 <= code <= 127


def isprint(code: int) -> bool:
    """True for printable ASCII codes, space included."""
    return 32 <= code <= 126


def toupper(code: int) -> int:
    """Map a lower-case ASCII letter code to upper case; leave others alone."""
    if _LOWER_A <= code <= _LOWER_Z:
        return code - _CASE_OFFSET
    return code


def tolower(code: int) -> int:
    """Map an upper-case ASCII letter code to lower case; leave others alone."""
    if _UPPER_A <= code <= _UPPER_Z:
        return code + _CASE_OFFSET
    return code
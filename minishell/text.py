"""String helpers used by the shell: parsing, splitting, searching and copying."""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_INT_MIN = -2147483648
_INT_MAX = 2147483647
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT_MIN) % (1 << 32) + _INT_MIN


def _check_char(ch: str, name: str = "ch") -> None:
    if len(ch) != 1:
        raise ValueError(f"{name} must be a single character, got {ch!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted. Parsing
    stops at the first non-digit. If the running value leaves the 32-bit
    range before another digit is read, -2 is returned; otherwise the result
    is wrapped to a signed 32-bit integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        if result < _INT_MIN or result > _INT_MAX:
            return -2
        result = result * 10 + (ord(ch) - ord("0"))
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    _check_char(sep, "sep")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, chars: str | None) -> str:
    """Strip every character of ``chars`` from both ends of ``text``.

    ``None`` or an empty set of characters leaves the text unchanged.
    """
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference at the first mismatch, or 0 when the
    compared prefixes are equal. A string that ends early compares as NUL.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``.

    Searching for NUL gives the length of the text; a missing character gives
    None.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``.

    Searching for NUL gives the length of the text; a missing character gives
    None.
    """
    _check_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. If ``dst`` already fills the buffer it is left unchanged and
    ``size + len(src)`` is reported.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))
"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable
from typing import Any, TextIO

_UINT32 = 1 << 32
_ULONG = 1 << 64
_HEX_DIGITS = "0123456789abcdef"


def _int32(value: Any) -> int:
    number = operator.index(value)
    return (number + (1 << 31)) % _UINT32 - (1 << 31)


def _uint32(value: Any) -> int:
    return operator.index(value) % _UINT32


def _signed(value: Any) -> str:
    return str(_int32(value))


def _unsigned(value: Any) -> str:
    return str(_uint32(value))


def _hex_lower(value: Any) -> str:
    return format(_uint32(value), "x")


def _hex_upper(value: Any) -> str:
    return format(_uint32(value), "X")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _address(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) % _ULONG
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "c": _char,
    "s": _string,
    "p": _address,
    "x": _hex_lower,
    "X": _hex_upper,
}

_MISSING = object()


def format_string(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args`` and return the resulting text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the template is dropped.
    """
    if not isinstance(template, str):
        raise TypeError("template must be a string")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise TypeError(f"not enough arguments for conversion %{spec}")
        pieces.append(convert(value))
    return "".join(pieces)


def printf(template: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded template to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)
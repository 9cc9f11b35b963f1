"""A small printf: %c %s %d %i %u %p %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 2**64 - 1
_MISSING = object()


def number_base(n: int, base: str) -> str:
    """Write a non-negative integer with the digits of base."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    n = operator.index(n)
    if n < 0:
        raise ValueError("only non-negative numbers can be written in a base")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def _to_int32(value: Any) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _integer(value: Any) -> str:
    number = _to_int32(value)
    if number < 0:
        return "-" + number_base(-number, DECIMAL)
    return number_base(number, DECIMAL)


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    return "0x" + number_base(address, HEX_LOWER)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "d": _integer,
    "i": _integer,
    "u": lambda value: number_base(_to_uint32(value), DECIMAL),
    "p": _pointer,
    "x": lambda value: number_base(_to_uint32(value), HEX_LOWER),
    "X": lambda value: number_base(_to_uint32(value), HEX_UPPER),
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    arguments = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone trailing '%' is dropped.
            return
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            # '%%' and unknown specifiers both print the specifier itself.
            yield spec
            continue
        value = next(arguments, _MISSING)
        if value is _MISSING:
            raise TypeError(f"not enough arguments for %{spec}")
        yield convert(value)


def render_format(fmt: Optional[str], *args: Any) -> str:
    """The text printf would write for fmt and args."""
    if fmt is None:
        return ""
    return "".join(_pieces(fmt, args))


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    text = render_format(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
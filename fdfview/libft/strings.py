"""String helpers: splitting, searching, copying, trimming and integer conversion."""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, Optional, Union

from fdfview.libft.chars import is_digit

CharLike = Union[int, str]

_SPACES = " \t\n\r\f\v"
_INT_BITS = 32


def _as_char(c: CharLike) -> str:
    """Turn a character code or a one-character string into a character."""
    if isinstance(c, bool):
        raise TypeError("expected a character code or a one-character string")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError("expected a character code or a one-character string")


def _require_str(*values) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")


def _require_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty words."""
    _require_str(s)
    sep = _as_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s; the terminator "\\0" is found at len(s)."""
    _require_str(s)
    ch = _as_char(c)
    if ch == "\0":
        index = s.find(ch)
        return len(s) if index < 0 else index
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; the terminator "\\0" is found at len(s)."""
    _require_str(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def striteri(s: str, f: Callable[[int, str], object]) -> None:
    """Call f(index, char) for every character of s."""
    _require_str(s)
    for index, ch in enumerate(s):
        f(index, ch)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from f(index, char) for every character of s.

    A "\\0" returned by f ends the resulting string there.
    """
    _require_str(s)
    if f is None:
        raise TypeError("a mapping function is required")
    mapped = "".join(_as_char(f(index, ch)) for index, ch in enumerate(s))
    return mapped.split("\0", 1)[0]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    _require_str(s1, s2)
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src.
    """
    _require_str(src)
    _require_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters.

    Returns the resulting text and the length the full result would have had,
    where dst counts as at most size characters.
    """
    _require_str(dst, src)
    _require_size(size)
    dst_len = len(dst)
    result = dst
    if size > 0 and dst_len < size - 1:
        result = dst + src[: size - dst_len - 1]
    return result, min(dst_len, size) + len(src)


def strncpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src; return them and len(src)."""
    _require_str(src)
    _require_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch."""
    _require_str(s1, s2)
    _require_size(n)
    index = 0
    while index < n and index < len(s1) and _code_at(s1, index) == _code_at(s2, index):
        index += 1
    if index == n:
        return 0
    return _code_at(s1, index) - _code_at(s2, index)


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first little in big that ends within n characters, or None."""
    _require_str(big, little)
    _require_size(n)
    if not little:
        return 0
    for index in range(len(big)):
        if index + len(little) > n:
            break
        if big.startswith(little, index):
            return index
    return None


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in charset from both ends of s."""
    _require_str(s, charset)
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty if start is past the end."""
    _require_str(s)
    if start < 0:
        raise ValueError("start must not be negative")
    _require_size(length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def atoi(s: str) -> int:
    """Parse a leading decimal integer after whitespace and an optional sign.

    Values outside a 32-bit signed integer wrap around.
    """
    _require_str(s)
    text = s.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(is_digit, text))
    value = int(digits) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus sign if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    return str(n)
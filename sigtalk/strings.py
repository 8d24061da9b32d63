"""Bounded string search, comparison, copying and trimming.

Strings are handled the way NUL-terminated text behaves: a string's content
ends at its first ``"\\0"`` character, if it holds one. Positions are
returned as indices into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """Return the part of *s* before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    """Return *c* as a one-character string, truncating integers to a byte."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c
    raise TypeError("a character must be an int or a one-character str")


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Return the number of characters before the terminating NUL."""
    return len(_cstr(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first *c* in *s*, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last *c* in *s*, or ``None``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns 0 when they match, otherwise the difference between the codes
    of the first differing characters; the shorter string counts as having
    a NUL where it ends.
    """
    n = _non_negative(n, "n")
    pairs = zip_longest(_cstr(s1), _cstr(s2), fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find *little* lying wholly within the first *length* characters of *big*.

    Returns the index where it starts, 0 for an empty *little*, or ``None``.
    """
    length = _non_negative(length, "length")
    needle = _cstr(little)
    if not needle:
        return 0
    index = _cstr(big)[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text, cut to at most ``size - 1`` characters (empty
    when *size* is 0), and the full length of *src*; a length not below
    *size* means the copy was truncated.
    """
    size = _non_negative(size, "size")
    text = _cstr(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the full result would have
    needed. When *size* does not exceed the length of *dst*, *dst* is
    returned unchanged with ``len(src) + size``.
    """
    size = _non_negative(size, "size")
    head = _cstr(dst)
    tail = _cstr(src)
    if size <= len(head):
        return head, len(tail) + size
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* starting at *start*.

    A *start* past the end gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    text = _cstr(s)
    if start > len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of *s* found in *charset*."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars:
        return text
    return text.strip(chars)
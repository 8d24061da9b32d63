"""Whole-string transformations: splitting, mapping and duplicating.

As elsewhere in the package, a string's content ends at its first ``"\\0"``
character, if it holds one.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, List, Optional, Union

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


def split(s: str, sep: CharLike) -> List[str]:
    """Split *s* at every *sep* character, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty
    words. A NUL separator never occurs inside the text, so the whole text
    is a single word.
    """
    text = _cstr(s)
    delimiter = _char(sep)
    if delimiter == _NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of *s*."""
    text = _cstr(s)
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    s: MutableSequence[Any], func: Callable[[int, Any], Optional[Any]]
) -> None:
    """Call ``func(index, item)`` on each item of the mutable sequence *s*.

    Iteration stops at the first NUL item (``"\\0"`` or ``0``). When *func*
    returns something other than ``None``, that value replaces the item in
    place.
    """
    if isinstance(s, (str, bytes)) or not isinstance(s, MutableSequence):
        raise TypeError("striteri needs a mutable sequence such as a list or bytearray")
    for index, item in enumerate(s):
        if isinstance(item, str) and item == _NUL:
            break
        if isinstance(item, int) and not isinstance(item, bool) and item == 0:
            break
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement


def strdup(s: str) -> str:
    """Return a copy of the content of *s*, up to its terminating NUL."""
    return _cstr(s)
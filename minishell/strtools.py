"""String helpers: searching, comparing, slicing, joining, trimming and splitting."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; ints are taken as unsigned chars."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of ``s``."""
    return str(s)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end of
    a string counting as code 0; returns 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    for i in range(n):
        c1 = ord(s1[i]) if i < len(s1) else 0
        c2 = ord(s2[i]) if i < len(s2) else 0
        if c1 != c2 or c1 == 0:
            return c1 - c2
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied (possibly truncated) string and the length of ``src``,
    so truncation happened when the length is ``size`` or more.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length it tried to create:
    ``min(len(dst), size) + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    start = min(len(dst), size)
    if start >= size:
        return dst, start + len(src)
    room = max(size - start - 1, 0)
    return dst + src[:room], start + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    if s1 is None or s2 is None:
        raise TypeError("cannot join None")
    return s1 + s2


def strtrim(s: str, charset: Optional[str]) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed.

    A ``charset`` of None leaves ``s`` unchanged.
    """
    if charset is None or not charset:
        return str(s)
    return s.strip(charset)


def split(s: Optional[str], sep: CharLike) -> List[str]:
    """Non-empty words of ``s`` separated by runs of ``sep``.

    None splits into no words.
    """
    if s is None:
        return []
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for every character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``f(index, char)`` on each character of ``s`` in place.

    A character is replaced by what ``f`` returns unless that is None.
    Returns ``s``.
    """
    for index, ch in enumerate(s):
        result = f(index, ch)
        if result is not None:
            s[index] = result
    return s
"""String helpers with bounded copies, searches that return indices, and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first position where the
    strings differ or where either one ends (an ended string counts as 0), or
    0 when the first ``n`` characters are equal.
    """
    _check_non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0 or b == 0:
            return a - b
    return 0


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character yields the length of ``text``.
    """
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``, or None.

    Searching for the NUL character yields the length of ``text``.
    """
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within ``big[:length]``.

    An empty ``little`` is found at index 0; otherwise a zero ``length``
    finds nothing. Returns None when there is no match.
    """
    _check_non_negative("length", length)
    if not little:
        return 0
    if length == 0:
        return None
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which shows whether the copy was truncated.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dest`` already fills the buffer nothing is appended and
    the reported length is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    dest_len = min(len(dest), size)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest[:dest_len] + src[:room], len(src) + dest_len


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return f"{n:d}"


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def striteri(chars: MutableSequence, func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on every element of ``chars`` in order.

    When ``func`` returns a value other than None, that value replaces the
    element in place.
    """
    for i, ch in enumerate(chars):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement
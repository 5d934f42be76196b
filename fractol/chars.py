"""Character classification and case conversion limited to the ASCII range.

Every function accepts either a one-character string or an integer code
point. Classification functions return a bool. Case conversion returns a
value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_ASCII = range(0, 128)
_PRINTABLE = range(32, 127)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return _code(c) in _PRINTABLE


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if code in _UPPER:
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code
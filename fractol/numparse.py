"""Lenient number parsing and validation for command-line arguments."""

from __future__ import annotations

import re

from fractol.chars import is_digit

_LEADING_INT = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")
_DOUBLE = re.compile(r"(?:[+-](?=[0-9]))?[0-9]*(?:\.[0-9]+)?")


def _leading_integer(text: str) -> int:
    match = _LEADING_INT.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits yields 0.
    """
    return _leading_integer(text)


def atol(text: str) -> int:
    """Parse the leading integer of ``text``; same rules as :func:`atoi`."""
    return _leading_integer(text)


def atof(text: str) -> float:
    """Parse a decimal number of the form ``[sign]digits[.digits]``.

    The integer part is read as by :func:`atoi`. The fractional part is the
    integer read after the first ``.``, divided by ten once per character
    that follows the point. When the text starts with ``-`` the sum of both
    parts is negated, so the sign is applied to the already signed integer
    part as well: ``"-0.7"`` gives ``-0.7`` while ``"-1.5"`` gives ``0.5``.
    Without a point the integer part is returned as is.
    """
    negative = text.startswith("-")
    whole = atoi(text)
    _, point, fraction = text.partition(".")
    if not point:
        return float(whole)
    decimal = float(atol(fraction))
    for _ in fraction:
        decimal /= 10
    total = whole + decimal
    return -total if negative else total


def is_double(text: str) -> bool:
    """True if ``text`` is ``[sign]digits[.digits]`` with ASCII digits.

    A sign must be followed by a digit, and a point must be followed by at
    least one digit. The empty string is accepted.
    """
    return _DOUBLE.fullmatch(text) is not None


def contains_non_digit(text: str) -> bool:
    """True if ``text``, after one optional leading ``-``, holds a non-digit."""
    body = text[1:] if text.startswith("-") else text
    return any(not is_digit(ch) for ch in body)
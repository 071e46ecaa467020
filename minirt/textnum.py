"""Strict number parsing and field splitting for scene text."""

from __future__ import annotations

import math
import re
from itertools import groupby

_SPACE = "\t\n\v\f\r "
_FLOAT_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)(\.([0-9]*))?")
_INT_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")
_LONG_LIMIT = 922337203685477580


def parse_float(text: str | None) -> float:
    """Parse a plain decimal number such as ``-1.25``.

    Leading whitespace and a sign are accepted; anything after the digits
    (including exponents and trailing whitespace) raises ValueError.
    """
    if text is None:
        raise ValueError("no number given")
    match = _FLOAT_PATTERN.fullmatch(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise ValueError(f"not a number: {text!r}")
    sign = -1 if match.group(1) == "-" else 1

    integer = 0.0
    for digit in match.group(2):
        integer = integer * 10 + int(digit)
    if match.group(3) is None:
        return integer * sign

    decimal = 0.0
    places = 0
    for digit in match.group(4):
        candidate = decimal * 10 + int(digit)
        if math.isinf(candidate):
            break
        decimal = candidate
        places += 1
    for _ in range(places):
        decimal /= 10
    return (integer + decimal) * sign


def parse_int(text: str | None) -> int:
    """Parse a decimal integer, wrapping the result to 32 bits.

    Leading whitespace and a sign are accepted. Values that do not fit a
    64-bit signed integer, or trailing characters, raise ValueError.
    An empty string (or a bare sign) reads as zero.
    """
    if text is None:
        raise ValueError("no number given")
    match = _INT_PATTERN.match(text)
    negative = match.group(1) == "-"
    last_allowed = 8 if negative else 7
    number = 0
    for char in match.group(2):
        digit = int(char)
        if number > _LONG_LIMIT or (number == _LONG_LIMIT and digit >= last_allowed):
            raise ValueError(f"number out of range: {text!r}")
        number = number * 10 + digit
    if match.end() != len(text):
        raise ValueError(f"not an integer: {text!r}")
    value = -number if negative else number
    return (value + 2**31) % 2**32 - 2**31


def split_fields(line: str, separators: str) -> list[str]:
    """Split ``line`` on any character of ``separators``, dropping empty fields."""
    return [
        "".join(chars)
        for is_separator, chars in groupby(line, key=lambda c: c in separators)
        if not is_separator
    ]
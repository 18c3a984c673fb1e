"""Type conversion utilities.

None of these raise on malformed input. Each one has its own
"could not convert" sentinel instead:

- to_int / to_float: float('nan')
- to_date: None
"""

import math
import re
from datetime import date, datetime
from numbers import Real
from typing import Any

from dateutil import parser as date_parser

from ..core.constants import BooleanStrings, IntegerParsing

_FLOAT_PATTERN = re.compile(r'^[+-]?(?:[0-9]+)?(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?$')
_HEX_PREFIX = re.compile(r'^0[xX]')
_DEFAULT_DATES = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real)


def to_boolean(value: Any, strict: bool = False) -> bool:
    """Convert the input to a boolean.

    Non-string values use Python truthiness. For strings, everything except
    '0', 'false' and '' returns True. In strict mode only '1' and 'true'
    return True. Comparison is case-insensitive.

    Examples:
        >>> to_boolean("no")
        True
        >>> to_boolean("no", strict=True)
        False
    """
    if not isinstance(value, str):
        return bool(value)

    lowered = value.lower()
    if strict:
        return lowered in BooleanStrings.STRICT_TRUTHY
    return lowered not in BooleanStrings.FALSY


def to_date(value: Any) -> date | None:
    """Convert the input to a date, or None if the input is not a date.

    date and datetime values are returned unchanged. Anything else is
    parsed from its string form. Partial dates (no year, month or day)
    give None rather than being completed from the current date.

    Examples:
        >>> to_date("2024-01-15")
        datetime(2024, 1, 15, 0, 0)
        >>> to_date("not a date")
        None
    """
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    # A complete date parses the same against both defaults
    try:
        parsed = date_parser.parse(text, default=_DEFAULT_DATES[0])
        if parsed != date_parser.parse(text, default=_DEFAULT_DATES[1]):
            return None
    except (ValueError, OverflowError):
        return None
    return parsed


def to_float(value: Any) -> float:
    """Convert the input to a float, or nan if it is not a float.

    Numbers pass through unchanged.

    Examples:
        >>> to_float("3.14")
        3.14
        >>> to_float("abc")
        nan
    """
    if _is_number(value):
        return value

    text = str(value).strip()
    if text in ('', '.', '+', '-') or not _FLOAT_PATTERN.match(text):
        return math.nan

    try:
        return float(text)
    except ValueError:
        return math.nan


def to_int(value: Any, radix: int | None = None) -> int | float:
    """Convert the input to an integer, or nan if it is not an integer.

    Numbers are truncated toward zero. Strings are parsed like
    JavaScript's parseInt: leading whitespace and sign are accepted, then
    digits valid for the radix are read up to the first invalid character.

    Args:
        value: Value to convert
        radix: Base between 2 and 36 (default 10; '0x' prefix allowed for 16)

    Returns:
        int, or float('nan') if nothing could be parsed

    Examples:
        >>> to_int("42px")
        42
        >>> to_int("ff", 16)
        255
        >>> to_int(-3.9)
        -3
    """
    if _is_number(value):
        if isinstance(value, float) and not math.isfinite(value):
            return math.nan
        return math.trunc(value)

    text = str(value).strip()

    sign = 1
    if text[:1] in ('+', '-'):
        sign = -1 if text[0] == '-' else 1
        text = text[1:]

    if radix is None or radix == 0:
        radix = IntegerParsing.DEFAULT_RADIX
        if _HEX_PREFIX.match(text):
            radix = 16
            text = text[2:]
    else:
        try:
            radix = int(radix)
        except (TypeError, ValueError):
            return math.nan
        if radix == 16 and _HEX_PREFIX.match(text):
            text = text[2:]

    if not IntegerParsing.MIN_RADIX <= radix <= IntegerParsing.MAX_RADIX:
        return math.nan

    valid_digits = IntegerParsing.DIGITS[:radix]
    length = 0
    for char in text.lower():
        if char not in valid_digits:
            break
        length += 1

    if length == 0:
        return math.nan

    return sign * int(text[:length], radix)


def to_string(value: Any) -> str:
    """Convert the input to a string using its natural textual form."""
    return str(value)

"""
Number and date formatters for frametools.

Default separators follow ABNT NBR 5891 (Brazilian/continental convention)
and can be overridden per call or through frametools.config:
- Thousands: dot (.)
- Decimal: comma (,)

Rounding: floats are rounded half away from zero on their shortest decimal
representation, so 2.005 at 2 places gives '2,01' regardless of how the
value is stored in binary.
"""
import enum
import math
import numbers
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Tuple, Union

import numpy as np
import pandas as pd

from .. import config
from ..errors import InvalidArgumentError
from .columns import is_missing, is_number, select_columns


class NumberKind(enum.Enum):
    INTEGER = "integer"
    FLOAT = "float"
    OTHER = "other"


def number_kind(value: Any) -> NumberKind:
    """
    Classifies a value for format_number.

    Booleans and non-finite floats (nan, inf) are OTHER, as is anything that
    is not an integer or a binary float (str, Decimal, Fraction, ...).
    """
    if isinstance(value, (bool, np.bool_)):
        return NumberKind.OTHER
    if isinstance(value, numbers.Integral):
        return NumberKind.INTEGER
    if isinstance(value, (float, np.floating)) and math.isfinite(value):
        return NumberKind.FLOAT
    return NumberKind.OTHER


def format_integer(value: int, thousands_separator: str = config.THOUSANDS_SEPARATOR) -> str:
    """
    Formats an integer with a thousands separator.

    Args:
        value: Integer to format
        thousands_separator: Inserted between groups of three digits (used as-is)

    Returns:
        Formatted string, with a leading '-' for negative values

    Examples:
        >>> format_integer(1234567)
        '1.234.567'
        >>> format_integer(-1000, ",")
        '-1,000'
        >>> format_integer(999)
        '999'
    """
    value = int(value)
    formatted = f"{abs(value):,d}".replace(",", thousands_separator)
    return f"-{formatted}" if value < 0 else formatted


def round_half_up(value: float, decimal_places: int = 0) -> Decimal:
    """Rounds the decimal representation of value half away from zero."""
    exact = Decimal(repr(float(value)))
    # enough precision that quantize never fails for large magnitudes
    context = Context(prec=max(28, exact.adjusted() + decimal_places + 2))
    return exact.quantize(Decimal(1).scaleb(-decimal_places), rounding=ROUND_HALF_UP, context=context)


def format_float(value: float,
                 thousands_separator: str = config.THOUSANDS_SEPARATOR,
                 decimal_separator: str = config.DECIMAL_SEPARATOR,
                 decimal_places: int = config.DECIMAL_PLACES) -> str:
    """
    Formats a float with thousands and decimal separators.

    Args:
        value: Finite number to format
        thousands_separator: Separator for the integer part (default: '.')
        decimal_separator: Separator between integer and fractional digits (default: ',')
        decimal_places: Number of fractional digits; 0 omits the decimal separator

    Returns:
        Formatted string

    Raises:
        InvalidArgumentError: decimal_places is negative or value is nan/inf

    Examples:
        >>> format_float(1234.56)
        '1.234,56'
        >>> format_float(-1234.5)
        '-1.234,50'
        >>> format_float(1234.5, ",", ".", 0)
        '1,235'
    """
    if decimal_places < 0:
        raise InvalidArgumentError(f"decimal_places must be >= 0, got {decimal_places}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"cannot format non-finite value {value!r}")

    rounded = round_half_up(value, decimal_places)
    # Decimal('-0.00') < 0 is False, so values rounding to zero lose their sign
    sign = "-" if rounded < 0 else ""
    integer_digits, _, fraction_digits = f"{rounded.copy_abs():f}".partition(".")
    formatted = sign + format_integer(int(integer_digits), thousands_separator)
    if decimal_places == 0:
        return formatted
    return f"{formatted}{decimal_separator}{fraction_digits}"


def format_number(value: Any,
                  thousands_separator: str = config.THOUSANDS_SEPARATOR,
                  decimal_separator: str = config.DECIMAL_SEPARATOR,
                  decimal_places: int = config.DECIMAL_PLACES,
                  int_show_decimals: bool = False) -> str:
    """
    Formats an integer or a float; anything else is converted with str().

    Integers are shown without decimals unless int_show_decimals is set.

    Examples:
        >>> format_number(1234567)
        '1.234.567'
        >>> format_number(1234, int_show_decimals=True)
        '1.234,00'
        >>> format_number("n/a")
        'n/a'
    """
    kind = number_kind(value)
    if kind is NumberKind.INTEGER:
        if int_show_decimals:
            return format_float(float(value), thousands_separator, decimal_separator, decimal_places)
        return format_integer(value, thousands_separator)
    elif kind is NumberKind.FLOAT:
        return format_float(float(value), thousands_separator, decimal_separator, decimal_places)
    else:
        return str(value)


def format_numbers(values: Union[Iterable[Any], pd.Series, pd.DataFrame],
                   thousands_separator: str = config.THOUSANDS_SEPARATOR,
                   decimal_separator: str = config.DECIMAL_SEPARATOR,
                   decimal_places: int = config.DECIMAL_PLACES,
                   int_show_decimals: bool = False) -> Union[List[str], pd.Series, pd.DataFrame]:
    """
    Formats every element of a sequence, Series or DataFrame with format_number.

    - sequence: returns a list of the same length and order
    - Series: returns an object Series with the same index and name
    - DataFrame: returns a copy where each column holding only numbers (and
      missing values) is converted to strings; other columns are untouched

    Missing values stay None in every variant. The input is never modified.
    """
    options = dict(
        thousands_separator=thousands_separator,
        decimal_separator=decimal_separator,
        decimal_places=decimal_places,
        int_show_decimals=int_show_decimals,
    )

    if isinstance(values, pd.DataFrame):
        formatted = values.copy()
        for col in select_columns(formatted, is_number):
            formatted[col] = format_numbers(formatted[col], **options)
        return formatted

    cells = [None if is_missing(v) else format_number(v, **options) for v in values]
    if isinstance(values, pd.Series):
        return pd.Series(cells, index=values.index, name=values.name, dtype=object)
    return cells


# Numeric date fields; one letter is unpadded, a longer run is zero-padded to its length
_DATE_FIELDS = {
    "y": "year",
    "m": "month",
    "d": "day",
    "H": "hour",
    "M": "minute",
    "S": "second",
}

# Name fields, rendered through strftime whatever the run length
_DATE_NAMES = {
    "u": "%b",
    "U": "%B",
    "e": "%a",
    "E": "%A",
}


def parse_date_format(date_format: str) -> List[Union[str, Tuple[str, int]]]:
    """
    Splits a 'dd-mm-yyyy' style pattern into (letter, run length) codes and literal text.

    Examples:
        >>> parse_date_format("d/mm/yyyy")
        [('d', 1), '/', ('m', 2), '/', ('y', 4)]
    """
    parts = []
    i = 0
    while i < len(date_format):
        letter = date_format[i]
        run = 1
        while i + run < len(date_format) and date_format[i + run] == letter:
            run += 1
        if letter in _DATE_FIELDS or letter in _DATE_NAMES:
            parts.append((letter, run))
        elif parts and isinstance(parts[-1], str):
            parts[-1] += letter * run
        else:
            parts.append(letter * run)
        i += run
    return parts


def _render_date_code(value: Any, letter: str, width: int) -> str:
    if letter in _DATE_NAMES:
        return value.strftime(_DATE_NAMES[letter])
    number = getattr(value, _DATE_FIELDS[letter], 0)
    if letter == "y" and width == 2:
        return f"{number % 100:02d}"
    return str(number).zfill(width)


def format_date(value: Any, date_format: str = config.DATE_FORMAT) -> str:
    """
    Formats a date, datetime or Timestamp.

    Pattern letters: y (year), m (month), d (day), H (hour), M (minute),
    S (second), u/U (short/full month name), e/E (short/full day name).
    A single letter gives the unpadded value, a run zero-pads to the run
    length, and 'yy' gives the two-digit year. Other characters are copied.
    A pattern containing '%' is handed to strftime as-is.

    Examples:
        >>> import datetime
        >>> format_date(datetime.date(2024, 1, 31))
        '31-01-2024'
        >>> format_date(datetime.date(2024, 1, 5), "d/m/yyyy")
        '5/1/2024'
    """
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    if "%" in date_format:
        return value.strftime(date_format)
    return "".join(
        part if isinstance(part, str) else _render_date_code(value, *part)
        for part in parse_date_format(date_format)
    )

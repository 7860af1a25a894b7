"""
frametools: number formatting and inspection helpers for pandas DataFrames.
"""

from .errors import (
    FrametoolsError,
    InvalidArgumentError,
    OutOfRangeError,
    ColumnNotFoundError,
)
from .utils.formatters import (
    format_integer,
    format_float,
    format_number,
    format_numbers,
    format_date,
)
from .inspector import (
    ColumnDescriptor,
    transpose_dataframe,
    first_rows,
    last_rows,
    find_rows,
    column_types,
    count_missing,
    replace_missing,
    remove_cols_missing,
    describe_number_cols,
    describe_string_cols,
    describe_date_cols,
    describe_column,
)

__all__ = [
    # Errors
    'FrametoolsError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'ColumnNotFoundError',
    # Formatting
    'format_integer',
    'format_float',
    'format_number',
    'format_numbers',
    'format_date',
    # Inspection
    'ColumnDescriptor',
    'transpose_dataframe',
    'first_rows',
    'last_rows',
    'find_rows',
    'column_types',
    'count_missing',
    'replace_missing',
    'remove_cols_missing',
    'describe_number_cols',
    'describe_string_cols',
    'describe_date_cols',
    'describe_column',
]

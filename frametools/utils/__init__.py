"""
Utilities module for frametools.
"""

# Number and date formatters (ABNT NBR 5891 defaults)
from .formatters import (
    NumberKind,
    number_kind,
    format_integer,
    format_float,
    format_number,
    format_numbers,
    format_date,
)

# Column predicates and selection
from .columns import (
    is_missing,
    is_number,
    is_string,
    is_date,
    select_columns,
    element_type,
)

__all__ = [
    # Formatters
    'NumberKind',
    'number_kind',
    'format_integer',
    'format_float',
    'format_number',
    'format_numbers',
    'format_date',
    # Columns
    'is_missing',
    'is_number',
    'is_string',
    'is_date',
    'select_columns',
    'element_type',
]

"""
Exceptions raised by frametools.

All errors are raised at the call that detects them, before any output is
produced or any DataFrame is changed.
"""
from typing import List, Optional


class FrametoolsError(Exception):
    """Base class for frametools errors."""


class InvalidArgumentError(FrametoolsError, ValueError):
    """An argument is outside its accepted domain (e.g. a row count < 1)."""


class OutOfRangeError(FrametoolsError, IndexError):
    """A row position lies beyond the extent of the DataFrame."""


class ColumnNotFoundError(FrametoolsError, KeyError):
    """
    One or more referenced columns do not exist in the DataFrame.

    Attributes:
        missing_columns: Columns that were requested but not found
        available_columns: Columns present in the DataFrame
    """

    def __init__(self, missing_columns: List[str], available_columns: Optional[List[str]] = None):
        self.missing_columns = [str(c) for c in missing_columns]
        self.available_columns = [str(c) for c in (available_columns or [])]
        super().__init__(self.missing_columns)

    def __str__(self) -> str:
        return (
            f"Column(s) not found: {', '.join(self.missing_columns)}\n"
            f"Available columns: {', '.join(self.available_columns)}"
        )

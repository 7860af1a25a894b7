"""
Column helpers shared by the formatters and the inspector.

Value predicates (is_number, is_string, is_date) classify a single non-missing
cell; select_columns applies one of them to every cell of every column.
"""
import datetime
import logging
import numbers
from typing import Any, Callable, Iterable, List

import numpy as np
import pandas as pd

from ..errors import ColumnNotFoundError

logger = logging.getLogger(__name__)


def is_missing(value: Any) -> bool:
    """True for None, NaN, pd.NA and pd.NaT. Non-scalar values are never missing."""
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def is_number(value: Any) -> bool:
    """Integers and floats (Python or numpy). Booleans are not numbers here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Integral, float, np.floating))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_date(value: Any) -> bool:
    # pd.Timestamp subclasses datetime.datetime, which subclasses datetime.date
    return isinstance(value, (datetime.date, np.datetime64))


def column_matches(series: pd.Series, predicate: Callable[[Any], bool]) -> bool:
    """
    True when the predicate holds for every non-missing value of the series.
    A column without non-missing values matches any predicate.
    """
    return all(predicate(value) for value in series if not is_missing(value))


def select_columns(df: pd.DataFrame, predicate: Callable[[Any], bool]) -> List[str]:
    """Returns, in table order, the columns whose values all satisfy the predicate."""
    selected = [col for col in df.columns if column_matches(df[col], predicate)]
    logger.debug(f"{getattr(predicate, '__name__', 'predicate')} selected {len(selected)} of {df.shape[1]} columns")
    return selected


def element_type(series: pd.Series) -> str:
    """Element type tag of a column, ignoring missing values (e.g. 'integer', 'string', 'date')."""
    return pd.api.types.infer_dtype(series, skipna=True)


def require_columns(df: pd.DataFrame, columns: Iterable) -> None:
    """Raises ColumnNotFoundError listing every requested column absent from df."""
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ColumnNotFoundError(missing, list(df.columns))

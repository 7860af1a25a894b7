"""
Convenience accessors for exploring a pandas DataFrame: row slicing,
transposition, lookup by key column, column types, missing-value audits and
per-type descriptive summaries.

replace_missing and remove_cols_missing change the DataFrame they receive
and return None; every other function returns a new DataFrame.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

import pandas as pd

from . import config
from .errors import InvalidArgumentError, OutOfRangeError
from .utils.columns import (
    column_matches,
    element_type,
    is_date,
    is_missing,
    is_number,
    is_string,
    require_columns,
    select_columns,
)
from .utils.formatters import format_date

logger = logging.getLogger(__name__)

NUMBER_STATS = ["mean", "q25", "median", "q75", "min", "max", "sum"]
STRING_STATS = ["nunique", "unique_items"]
DATE_STATS = ["nunique", "min", "max"]


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    eltype: str
    nmissing: int
    stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column": self.name,
            "eltype": self.eltype,
            "nmissing": self.nmissing,
            **self.stats,
        }


def transpose_dataframe(df: pd.DataFrame, start_row: int = 1, n_rows: int = 1) -> pd.DataFrame:
    """
    Transposes `n_rows` rows of df, starting at the 1-based `start_row`.

    The result has a 'Column' column with the original column names and one
    'Row<position>' column per selected row. Asking for more rows than are
    available stops at the last row.
    """
    total_rows = len(df)
    if start_row < 1 or n_rows < 1:
        raise InvalidArgumentError(
            f"start_row and n_rows must both be >= 1, got start_row={start_row}, n_rows={n_rows}"
        )
    if start_row > total_rows:
        raise OutOfRangeError(f"start_row {start_row} exceeds the number of rows ({total_rows})")

    last_row = min(start_row + n_rows - 1, total_rows)
    transposed = pd.DataFrame({"Column": list(df.columns)})
    for row in range(start_row, last_row + 1):
        # iat keeps each cell's own type instead of upcasting the whole row
        values = [df.iat[row - 1, j] for j in range(df.shape[1])]
        transposed[f"Row{row}"] = pd.Series(values, dtype=object)
    return transposed


def _present(df: pd.DataFrame, transpose: bool, columns: Optional[Sequence]) -> pd.DataFrame:
    """Applies the optional column subset and transposition shared by the row accessors."""
    if columns:
        df = df.loc[:, list(columns)]
    if not transpose:
        return df
    if len(df) == 0:
        return pd.DataFrame({"Column": list(df.columns)})
    return transpose_dataframe(df, 1, len(df))


def first_rows(df: pd.DataFrame, n: int, transpose: bool = False,
               columns: Optional[Sequence] = None) -> pd.DataFrame:
    """First `n` rows of df, optionally limited to `columns` and/or transposed."""
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    if columns:
        require_columns(df, columns)
    return _present(df.head(n), transpose, columns)


def last_rows(df: pd.DataFrame, n: int, transpose: bool = False,
              columns: Optional[Sequence] = None) -> pd.DataFrame:
    """Last `n` rows of df, optionally limited to `columns` and/or transposed."""
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    if columns:
        require_columns(df, columns)
    # tail(0) returns every row in some pandas versions
    tail = df.tail(n) if n > 0 else df.iloc[0:0]
    return _present(tail, transpose, columns)


def find_rows(df: pd.DataFrame, key_column: Any, search_value: Any, transpose: bool = False,
              columns: Optional[Sequence] = None) -> pd.DataFrame:
    """
    Rows of df whose `key_column` equals `search_value`, in their original order.

    Missing cells never match. No match gives an empty DataFrame.
    """
    require_columns(df, [key_column, *(columns or [])])
    mask = [not is_missing(value) and bool(value == search_value) for value in df[key_column]]
    found = df[pd.Series(mask, index=df.index, dtype=bool)]
    logger.debug(f"find_rows: {len(found)} row(s) with {key_column} == {search_value!r}")
    return _present(found, transpose, columns)


def column_types(df: pd.DataFrame) -> Dict[str, str]:
    """Element type tag of every column, sorted by column name."""
    return {col: element_type(df[col]) for col in sorted(df.columns, key=str)}


def count_missing(df: pd.DataFrame) -> pd.DataFrame:
    """Columns with at least one missing value and their number of missing values."""
    counts = df.isna().sum()
    rows = [{"column": col, "nmissing": int(count)} for col, count in counts.items() if count > 0]
    return pd.DataFrame(rows, columns=["column", "nmissing"])


def replace_missing(df: pd.DataFrame, column: Any, value: Any) -> None:
    """Replaces the missing values of `column` with `value`. Changes df in place."""
    require_columns(df, [column])
    nmissing = int(df[column].isna().sum())
    if nmissing == 0:
        return
    df[column] = df[column].fillna(value)
    logger.info(f"Replaced {nmissing} missing value(s) in column '{column}' with {value!r}")


def remove_cols_missing(df: pd.DataFrame) -> None:
    """Drops the columns that only contain missing values. Changes df in place."""
    empty_cols = [col for col in df.columns if df[col].isna().all()]
    if not empty_cols:
        return
    df.drop(columns=empty_cols, inplace=True)
    logger.info(f"Removed {len(empty_cols)} column(s) without values: {empty_cols}")


def _number_stats(series: pd.Series) -> Dict[str, Any]:
    values = pd.to_numeric(series.dropna())
    if values.empty:
        values = values.astype(float)
    return {
        "mean": values.mean(),
        "q25": values.quantile(0.25),
        "median": values.median(),
        "q75": values.quantile(0.75),
        "min": values.min(),
        "max": values.max(),
        "sum": values.sum(),
    }


def _string_stats(series: pd.Series, max_unique_items: int) -> Dict[str, Any]:
    distinct = sorted(set(v for v in series if not is_missing(v)))
    if len(distinct) <= max_unique_items:
        unique_items = ", ".join(distinct)
    else:
        unique_items = f">{max_unique_items}"
    return {"nunique": len(distinct), "unique_items": unique_items}


def _date_stats(series: pd.Series, date_format: str) -> Dict[str, Any]:
    values = [v for v in series if not is_missing(v)]
    if not values:
        return {"nunique": 0, "min": None, "max": None}
    # date and datetime do not compare with each other; Timestamps do
    stamps = pd.to_datetime(pd.Series(values, dtype=object))
    return {
        "nunique": int(stamps.nunique()),
        "min": format_date(stamps.min(), date_format),
        "max": format_date(stamps.max(), date_format),
    }


def _descriptor(df: pd.DataFrame, column: Any, stats: Dict[str, Any]) -> ColumnDescriptor:
    series = df[column]
    return ColumnDescriptor(
        name=column,
        eltype=element_type(series),
        nmissing=int(series.isna().sum()),
        stats=stats,
    )


def _describe(df: pd.DataFrame, predicate: Callable[[Any], bool], stat_names: List[str],
              compute: Callable[[pd.Series], Dict[str, Any]], sort: bool) -> pd.DataFrame:
    columns = select_columns(df, predicate)
    if sort:
        columns = sorted(columns, key=str)
    rows = [_descriptor(df, col, compute(df[col])).to_dict() for col in columns]
    return pd.DataFrame(rows, columns=["column", "eltype", "nmissing", *stat_names])


def describe_number_cols(df: pd.DataFrame) -> pd.DataFrame:
    """
    Describes the number columns of df: element type, missing count, mean,
    quartiles, min, max and sum over the non-missing values. Sorted by column name.
    """
    return _describe(df, is_number, NUMBER_STATS, _number_stats, sort=True)


def describe_string_cols(df: pd.DataFrame, max_unique_items: int = config.MAX_UNIQUE_ITEMS) -> pd.DataFrame:
    """
    Describes the string columns of df: element type, missing count, number of
    distinct values and the distinct values themselves. When there are more
    than `max_unique_items` distinct values, 'unique_items' is '>{max_unique_items}'.
    """
    return _describe(
        df, is_string, STRING_STATS,
        lambda series: _string_stats(series, max_unique_items),
        sort=False,
    )


def describe_date_cols(df: pd.DataFrame, date_format: str = config.DATE_FORMAT) -> pd.DataFrame:
    """
    Describes the date columns of df: element type, missing count, number of
    distinct values, and the first/last date formatted with `date_format`.
    """
    return _describe(
        df, is_date, DATE_STATS,
        lambda series: _date_stats(series, date_format),
        sort=False,
    )


def describe_column(df: pd.DataFrame, column: Any,
                    max_unique_items: int = config.MAX_UNIQUE_ITEMS,
                    date_format: str = config.DATE_FORMAT) -> ColumnDescriptor:
    """
    Descriptor of a single column, with the statistics of the first describer
    that applies (number, string, then date). Columns of any other kind only
    get their type and missing count.
    """
    require_columns(df, [column])
    series = df[column]
    if column_matches(series, is_number):
        stats = _number_stats(series)
    elif column_matches(series, is_string):
        stats = _string_stats(series, max_unique_items)
    elif column_matches(series, is_date):
        stats = _date_stats(series, date_format)
    else:
        stats = {}
    return _descriptor(df, column, stats)

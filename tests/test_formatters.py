from decimal import Decimal
import datetime

import numpy as np
import pandas as pd
import pytest

from frametools.errors import InvalidArgumentError
from frametools.utils.formatters import (
    NumberKind,
    format_date,
    format_float,
    format_integer,
    format_number,
    format_numbers,
    number_kind,
    parse_date_format,
    round_half_up,
)


def test_format_integer_groups_thousands():
    assert format_integer(1234567) == "1.234.567"
    assert format_integer(1000) == "1.000"
    assert format_integer(999) == "999"
    assert format_integer(0) == "0"


def test_format_integer_custom_and_empty_separator():
    assert format_integer(1234567, ",") == "1,234,567"
    assert format_integer(1234567, " ") == "1 234 567"
    assert format_integer(1234567, "") == "1234567"


def test_format_integer_negative_is_prefixed_positive():
    for n in [1, 12, 999, 1000, 65536, 10**12 + 7]:
        for sep in [".", ",", "'"]:
            assert format_integer(-n, sep) == "-" + format_integer(n, sep)


def test_format_integer_never_has_decimal_and_groups_by_three():
    for n in [0, 7, 42, 999, 1000, 123456, 1234567, 10**15]:
        text = format_integer(n, ".")
        assert "," not in text
        groups = text.split(".")
        assert 1 <= len(groups[0]) <= 3
        assert all(len(g) == 3 for g in groups[1:])
        assert text.replace(".", "") == str(n)


def test_format_integer_accepts_numpy_integers():
    assert format_integer(np.int64(-9876543)) == "-9.876.543"


def test_format_float_defaults():
    assert format_float(-1234.5) == "-1.234,50"
    assert format_float(1234.567) == "1.234,57"
    assert format_float(0.1, decimal_places=5) == "0,10000"


def test_format_float_custom_separators():
    assert format_float(1234567.891, ",", ".", 1) == "1,234,567.9"
    assert format_float(1234.5, ",", ".", 0) == "1,235"


def test_format_float_rounds_half_away_from_zero():
    assert format_float(2.005) == "2,01"
    assert format_float(-2.005) == "-2,01"
    assert format_float(0.5, decimal_places=0) == "1"
    assert format_float(2.5, decimal_places=0) == "3"
    assert format_float(-2.5, decimal_places=0) == "-3"


def test_format_float_zero_places_matches_format_integer():
    for x in [0.0, 0.4, 1.49, 999.6, 123456.789, -4321.2, -0.7]:
        assert format_float(x, decimal_places=0) == format_integer(int(round_half_up(x)))


def test_format_float_negative_rounding_to_zero_has_no_sign():
    assert format_float(-0.001) == "0,00"
    assert format_float(-0.4, decimal_places=0) == "0"


def test_format_float_large_values_keep_all_digits():
    assert format_float(1e20) == "100.000.000.000.000.000.000,00"


def test_format_float_rejects_bad_input():
    with pytest.raises(InvalidArgumentError):
        format_float(1.0, decimal_places=-1)
    with pytest.raises(ValueError):
        format_float(float("nan"))
    with pytest.raises(InvalidArgumentError):
        format_float(float("inf"))


def test_number_kind():
    assert number_kind(3) is NumberKind.INTEGER
    assert number_kind(np.int32(3)) is NumberKind.INTEGER
    assert number_kind(3.0) is NumberKind.FLOAT
    assert number_kind(np.float32(3.0)) is NumberKind.FLOAT
    assert number_kind(True) is NumberKind.OTHER
    assert number_kind(float("nan")) is NumberKind.OTHER
    assert number_kind(Decimal("1.5")) is NumberKind.OTHER
    assert number_kind("3") is NumberKind.OTHER


def test_format_number_dispatch():
    assert format_number(1234) == "1.234"
    assert format_number(1234, int_show_decimals=True) == "1.234,00"
    assert format_number(1234.5678, ",", ".", 3) == "1,234.568"
    assert format_number(np.float32(1.5)) == "1,50"
    assert format_number(np.int64(1234567)) == "1.234.567"


def test_format_number_falls_back_to_str():
    assert format_number("abc") == "abc"
    assert format_number(True) == "True"
    assert format_number(Decimal("1234.5")) == "1234.5"
    assert format_number(float("nan")) == "nan"


def test_format_numbers_sequence_keeps_length_and_order():
    values = [1, 2.5, 1000, -1234.5, 7]
    result = format_numbers(values)

    assert result == ["1", "2,50", "1.000", "-1.234,50", "7"]
    assert len(result) == len(values)


def test_format_numbers_series_keeps_index_and_missing():
    s = pd.Series([1000.0, None, 2.25], index=["a", "b", "c"], name="amount")
    result = format_numbers(s, decimal_places=1)

    assert list(result.index) == ["a", "b", "c"]
    assert result.name == "amount"
    assert result.tolist() == ["1.000,0", None, "2,3"]


def test_format_numbers_dataframe_formats_number_columns_only():
    df = pd.DataFrame({
        "n": [1000, 2000000],
        "f": [0.5, None],
        "s": ["a", "b"],
        "m": [1, "x"],
    })
    result = format_numbers(df, int_show_decimals=True)

    assert result["n"].tolist() == ["1.000,00", "2.000.000,00"]
    assert result["f"].tolist() == ["0,50", None]
    assert result["s"].tolist() == ["a", "b"]
    assert result["m"].tolist() == [1, "x"]
    # original is untouched
    assert df["n"].tolist() == [1000, 2000000]
    assert df["f"].dtype == float


def test_parse_date_format_groups_letter_runs():
    assert parse_date_format("dd-mm-yyyy") == [("d", 2), "-", ("m", 2), "-", ("y", 4)]
    assert parse_date_format("d U yyyy") == [("d", 1), " ", ("U", 1), " ", ("y", 4)]
    assert parse_date_format("at HH:MM") == ["at ", ("H", 2), ":", ("M", 2)]


def test_format_date_single_letters_are_unpadded():
    assert format_date(datetime.date(2024, 1, 5), "d/m/yyyy") == "5/1/2024"
    assert format_date(datetime.date(2024, 11, 25), "d/m/yyyy") == "25/11/2024"
    assert format_date(datetime.datetime(2024, 1, 5, 7, 3, 9), "H:M:S") == "7:3:9"
    assert format_date(datetime.datetime(2024, 1, 5, 7, 3, 9), "HH:MM:SS") == "07:03:09"


def test_format_date_two_digit_year_and_names():
    assert format_date(datetime.date(2024, 3, 5), "dd/mm/yy") == "05/03/24"
    assert format_date(datetime.date(2024, 3, 5), "d U yyyy") == "5 March 2024"
    assert format_date(datetime.date(2024, 3, 5), "e, dd u") == "Tue, 05 Mar"


def test_format_date():
    assert format_date(datetime.date(2024, 1, 31)) == "31-01-2024"
    assert format_date(datetime.date(2024, 1, 31), "yyyy/mm/dd") == "2024/01/31"
    assert format_date(pd.Timestamp("2024-03-05 14:30"), "yyyy-mm-dd HH:MM") == "2024-03-05 14:30"
    assert format_date(np.datetime64("2024-03-05")) == "05-03-2024"
    assert format_date(datetime.datetime(2024, 3, 5), "%Y") == "2024"

"""
tests/test_transforms/test_numeric.py — Tests for locale-formatted numeric parsing.
"""

from __future__ import annotations

import polars as pl
import pytest

from weo_pipeline.transforms.numeric import (
    integer_expr,
    numeric_expr,
    parse_numeric_string,
    unparseable_expr,
)


class TestParseNumericString:
    def test_thousands_separator_is_stripped(self):
        assert parse_numeric_string("2,453.89") == pytest.approx(2453.89)

    def test_multiple_thousands_groups(self):
        assert parse_numeric_string("1,234,567.5") == pytest.approx(1234567.5)

    def test_grouped_integer_is_thousands(self):
        assert parse_numeric_string("1,234") == pytest.approx(1234.0)

    def test_decimal_comma(self):
        assert parse_numeric_string("23000,1") == pytest.approx(23000.1)

    def test_negative_and_decimal(self):
        assert parse_numeric_string("-11.318") == pytest.approx(-11.318)
        assert parse_numeric_string("-1,050.25") == pytest.approx(-1050.25)

    def test_surrounding_and_inner_whitespace(self):
        assert parse_numeric_string("  42.5 ") == pytest.approx(42.5)
        assert parse_numeric_string("1 234.5") == pytest.approx(1234.5)

    @pytest.mark.parametrize("value", ["", "   ", "n/a", "--", "NA", "...", None])
    def test_missing_markers_are_null(self, value):
        assert parse_numeric_string(value) is None

    @pytest.mark.parametrize("value", ["abc", "12abc", "1.2.3", "nan", "inf"])
    def test_unparseable_is_null(self, value):
        assert parse_numeric_string(value) is None

    def test_underscore_digit_groups_are_unparseable(self):
        assert parse_numeric_string("1_000") is None

    def test_numbers_pass_through(self):
        assert parse_numeric_string(3) == 3.0
        assert parse_numeric_string(2.5) == 2.5
        assert parse_numeric_string(float("nan")) is None


class TestNumericExpr:
    def test_matches_scalar_parser(self):
        cells = ["2,453.89", "23000,1", "-0.5", " 7 ", "", "n/a", "--", "x1", None]
        df = pl.DataFrame({"v": cells}, schema={"v": pl.String})
        result = df.select(numeric_expr("v"))["v"].to_list()
        expected = [parse_numeric_string(c) for c in cells]
        assert len(result) == len(expected)
        for got, want in zip(result, expected):
            if want is None:
                assert got is None
            else:
                assert got == pytest.approx(want)

    def test_result_dtype_is_float(self):
        df = pl.DataFrame({"v": ["1", "2"]})
        assert df.select(numeric_expr("v"))["v"].dtype == pl.Float64

    def test_integer_expr(self):
        df = pl.DataFrame({"y": ["1980", " 2021 ", "n/a"]})
        result = df.select(integer_expr("y"))["y"]
        assert result.dtype == pl.Int64
        assert result.to_list() == [1980, 2021, None]

    def test_unparseable_expr_ignores_missing_markers(self):
        df = pl.DataFrame({"v": ["1.0", "n/a", "", "bad", None, "--", "??"]})
        flags = df.select(unparseable_expr("v"))["v"].to_list()
        assert flags == [False, False, False, True, False, False, True]

    def test_keeps_input_column_name(self):
        df = pl.DataFrame({"v": ["1", "n/a"], "y": ["2020", "x"]})
        result = df.with_columns(numeric_expr("v"), integer_expr("y"))
        assert result.columns == ["v", "y"]
        assert result["v"].to_list() == [1.0, None]

    def test_underscores_agree_with_scalar_parser(self):
        df = pl.DataFrame({"v": ["1_000", "1,000"]})
        assert df.select(numeric_expr("v"))["v"].to_list() == [
            parse_numeric_string("1_000"),
            parse_numeric_string("1,000"),
        ]

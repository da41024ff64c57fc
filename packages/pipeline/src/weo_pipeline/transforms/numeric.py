"""
transforms/numeric.py — Parsing of locale-formatted numeric strings.

WEO cells arrive as text: "2,453.89", " -0.5 ", "n/a", "--". Parsing never
raises; anything that is a missing marker or does not convert becomes null.

Separator rules:
  - Commas grouping digits in threes are thousands separators:
    "2,453.89" → 2453.89, "1,234" → 1234.0
  - A single comma followed by anything other than three digits, with no
    period, is a decimal comma: "23000,1" → 23000.1
  - Whitespace anywhere in the cell is ignored: "1 234.5" → 1234.5

Usage:
    from weo_pipeline.transforms.numeric import numeric_expr, parse_numeric_string

    parse_numeric_string("2,453.89")     # 2453.89
    parse_numeric_string("n/a")          # None

    df = df.with_columns(numeric_expr("value").alias("value"))
"""

from __future__ import annotations

import math
import re

import polars as pl

from weo_shared.constants import MISSING_MARKERS

_WHITESPACE_RE = re.compile(r"\s+")
_DECIMAL_COMMA_PATTERN = r"^[+-]?\d+,\d+$"
_GROUPED_THOUSANDS_PATTERN = r"^[+-]?\d{1,3}(,\d{3})+$"

_DECIMAL_COMMA_RE = re.compile(_DECIMAL_COMMA_PATTERN)
_GROUPED_THOUSANDS_RE = re.compile(_GROUPED_THOUSANDS_PATTERN)


def _is_decimal_comma(text: str) -> bool:
    return bool(_DECIMAL_COMMA_RE.match(text)) and not _GROUPED_THOUSANDS_RE.match(text)


def parse_numeric_string(value: object) -> float | None:
    """Convert one cell to float, or None if missing or unparseable."""
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None

    text = str(value).strip()
    if text in MISSING_MARKERS:
        return None

    text = _WHITESPACE_RE.sub("", text)
    if "_" in text:
        return None
    if _is_decimal_comma(text):
        text = text.replace(",", ".")
    else:
        text = text.replace(",", "")

    try:
        result = float(text)
    except ValueError:
        return None
    return result if math.isfinite(result) else None


def _normalized_text(col: str | pl.Expr) -> tuple[pl.Expr, pl.Expr]:
    expr = pl.col(col) if isinstance(col, str) else col
    text = expr.cast(pl.String).str.strip_chars()
    is_missing = text.is_null() | text.is_in(sorted(MISSING_MARKERS))

    compact = text.str.replace_all(r"\s+", "")
    decimal_comma = compact.str.contains(_DECIMAL_COMMA_PATTERN) & ~compact.str.contains(
        _GROUPED_THOUSANDS_PATTERN
    )
    normalized = (
        pl.when(decimal_comma)
        .then(compact.str.replace(",", ".", literal=True))
        .otherwise(compact.str.replace_all(",", "", literal=True))
    )
    return normalized, is_missing


def numeric_expr(col: str | pl.Expr) -> pl.Expr:
    """
    Polars expression form of parse_numeric_string().

    Args:
        col: Column name or expression holding text cells.

    Returns:
        Float64 expression; null for missing markers and unparseable cells.
    """
    normalized, is_missing = _normalized_text(col)
    parsed = normalized.cast(pl.Float64, strict=False)
    # parsed comes first so the result keeps the input column name
    return pl.when(~is_missing & parsed.is_finite()).then(parsed).otherwise(None)


def unparseable_expr(col: str | pl.Expr) -> pl.Expr:
    """Boolean expression: cell carries text that is not a missing marker and does not parse."""
    normalized, is_missing = _normalized_text(col)
    parsed = normalized.cast(pl.Float64, strict=False)
    return (~is_missing & ~parsed.is_finite().fill_null(False)).fill_null(False)


def integer_expr(col: str | pl.Expr) -> pl.Expr:
    """numeric_expr() truncated to Int64, for years and year markers."""
    return numeric_expr(col).cast(pl.Int64, strict=False)

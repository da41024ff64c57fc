"""
transforms/normalize.py — Column-level normalization helpers for raw WEO tables.

All helpers are stateless and work on polars DataFrames.

Usage:
    from weo_pipeline.transforms.normalize import (
        coerce_to_text,
        normalize_column_names,
        detect_year_columns,
    )

    df = coerce_to_text(raw)
    df = normalize_column_names(df)        # "WEO Subject Code" -> "weo_subject_code"
    years = detect_year_columns(df.columns)  # ["1980", "1981", ...]
"""

from __future__ import annotations

import re

import polars as pl

from weo_shared.constants import YEAR_COLUMN_PATTERN
from weo_pipeline.errors import MalformedInputError

_YEAR_RE = re.compile(YEAR_COLUMN_PATTERN)


def to_snake_case(name: str) -> str:
    """Convert 'WEO Subject Code' or 'Country/Series-specific Notes' to snake_case."""
    s = str(name).strip()
    s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", s)
    s = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s)
    s = re.sub(r"[\s/\-.]+", "_", s)
    s = re.sub(r"_+", "_", s)
    return s.strip("_").lower()


def normalize_column_names(df: pl.DataFrame) -> pl.DataFrame:
    """
    Rename every column to snake_case. Already-normalized names are unchanged.

    Raises:
        MalformedInputError: if two headers map to the same name ("ISO", "iso").
    """
    mapping = {col: to_snake_case(col) for col in df.columns}
    by_name: dict[str, list[str]] = {}
    for col, name in mapping.items():
        by_name.setdefault(name, []).append(col)
    clashes = {name: cols for name, cols in by_name.items() if len(cols) > 1}
    if clashes:
        raise MalformedInputError(f"Headers collide after normalization: {clashes}")
    return df.rename(mapping)


def coerce_to_text(df: pl.DataFrame) -> pl.DataFrame:
    """Cast every column to String so metadata and year columns share one dtype."""
    return df.with_columns(pl.all().cast(pl.String))


def detect_year_columns(columns: list[str]) -> list[str]:
    """Return the columns whose name is a four-digit year, in table order."""
    return [col for col in columns if _YEAR_RE.match(str(col).strip())]


def clean_string_columns(df: pl.DataFrame) -> pl.DataFrame:
    """Strip whitespace from all String columns."""
    return df.with_columns(
        [
            pl.col(c).str.strip_chars()
            for c in df.columns
            if df[c].dtype == pl.String
        ]
    )


def drop_blank_rows(df: pl.DataFrame, column: str) -> pl.DataFrame:
    """Drop rows where column is null or only whitespace."""
    return df.filter(
        pl.col(column).is_not_null() & (pl.col(column).str.strip_chars() != "")
    )

"""
models/records.py — polars schema of the tidy long-format output.

One row is one observation: (entity, indicator, year) → value, stamped
with the release vintage and the raw row it came from.
"""

from __future__ import annotations

import polars as pl

# Column order matches weo_shared.constants.TIDY_COLUMNS
TIDY_SCHEMA: dict[str, type[pl.DataType]] = {
    "entity_name": pl.String,
    "entity_code": pl.String,        # ISO 3166-1 alpha-3, null for groups and bad codes
    "raw_entity_code": pl.String,    # code as written in the release
    "subject_code": pl.String,
    "combined_label": pl.String,
    "short_name": pl.String,
    "short_unit": pl.String,
    "category": pl.String,
    "year": pl.Int64,
    "value": pl.Float64,
    "estimates_start_after": pl.Int64,
    "vintage": pl.String,
    "source_row": pl.Int64,
}

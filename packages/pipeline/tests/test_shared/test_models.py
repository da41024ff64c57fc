"""
tests/test_shared/test_models.py — Tests for the catalog entry model and tidy schema.
"""

from __future__ import annotations

import warnings

import polars as pl

from weo_shared.catalog import default_catalog
from weo_shared.constants import TIDY_COLUMNS
from weo_shared.models import TIDY_SCHEMA
from weo_pipeline.transforms.reshape import WeoReshaper


class TestTidySchema:
    def test_schema_covers_every_column(self):
        assert tuple(TIDY_SCHEMA) == TIDY_COLUMNS
        assert TIDY_SCHEMA["year"] == pl.Int64
        assert TIDY_SCHEMA["value"] == pl.Float64
        assert TIDY_SCHEMA["source_row"] == pl.Int64

    def test_reshaped_frame_matches_schema(self, weo_country_raw: pl.DataFrame):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            tidy = WeoReshaper().reshape(weo_country_raw, year=2023, month="Apr")
        assert dict(tidy.schema) == TIDY_SCHEMA


class TestCodeCatalogEntry:
    def test_to_row(self):
        row = default_catalog().get("LUR").to_row()
        assert row["subject_code"] == "LUR"
        assert set(row) == {"subject_code", "short_name", "short_unit", "combined_label", "category"}

"""
tests/conftest.py — Shared pytest fixtures for the pipeline test suite.

Provides:
  fixture_path()      — resolves paths to tests/fixtures/
  weo_country_bytes   — raw bytes of the country release sample
  weo_country_raw     — the country sample parsed as an all-text DataFrame
  weo_group_raw       — the group sample parsed as an all-text DataFrame
  scenario_raw        — one USA / NGDP_R row in already-normalized column names
"""

from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from weo_pipeline.sources.imf_weo import decode_release, parse_release

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def fixture_path() -> Path:
    return FIXTURES_DIR


# ---------------------------------------------------------------------------
# Sample release tables
# ---------------------------------------------------------------------------

@pytest.fixture
def weo_country_bytes() -> bytes:
    return (FIXTURES_DIR / "weo_country_sample.tsv").read_bytes()


@pytest.fixture
def weo_group_bytes() -> bytes:
    return (FIXTURES_DIR / "weo_group_sample.tsv").read_bytes()


@pytest.fixture
def weo_country_raw(weo_country_bytes: bytes) -> pl.DataFrame:
    """Country release sample: 5 series x 3 years (2020-2022)."""
    return parse_release(decode_release(weo_country_bytes))


@pytest.fixture
def weo_group_raw(weo_group_bytes: bytes) -> pl.DataFrame:
    """Group release sample: 3 series x 3 years (2020-2022)."""
    return parse_release(decode_release(weo_group_bytes))


@pytest.fixture
def scenario_raw() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "iso": ["USA"],
            "weo_subject_code": ["NGDP_R"],
            "2020": ["21000.5"],
            "2021": ["23000,1"],
        }
    )


"""
constants.py — shared constants used across the pipeline and CLI.

WEO column names, missing-value markers, release months, and the typed
literals for entity kinds and output formats live here so the source,
reshaper and writer agree on them.
"""

from __future__ import annotations

from typing import Final, Literal

EntityKind = Literal["country", "group"]
OutputFormat = Literal["long", "wide"]

ENTITY_KINDS: Final[tuple[str, ...]] = ("country", "group")
OUTPUT_FORMATS: Final[tuple[str, ...]] = ("long", "wide")

# ---------------------------------------------------------------------------
# Raw WEO columns (after snake_case normalization)
# ---------------------------------------------------------------------------
SUBJECT_CODE_COL: Final = "weo_subject_code"
ISO_COL: Final = "iso"
GROUP_NAME_COL: Final = "country_group_name"
ESTIMATES_START_COL: Final = "estimates_start_after"
GROUP_CODE_COL: Final = "weo_country_group_code"

# Entity-identifying column per entity kind
ENTITY_COLUMNS: Final[dict[str, str]] = {
    "country": ISO_COL,
    "group": GROUP_NAME_COL,
}

# Column carried into the output as raw_entity_code, per entity kind
RAW_CODE_COLUMNS: Final[dict[str, str]] = {
    "country": ISO_COL,
    "group": GROUP_CODE_COL,
}

# 0-based position of the raw row each tidy row came from
SOURCE_ROW_COL: Final = "source_row"

# Year columns are detected by this pattern, never enumerated
YEAR_COLUMN_PATTERN: Final = r"^\d{4}$"

# Cells the IMF uses for "no data"
MISSING_MARKERS: Final[frozenset[str]] = frozenset(
    {"", "n/a", "N/A", "NA", "--", "...", ".."}
)

# ---------------------------------------------------------------------------
# Tidy output
# ---------------------------------------------------------------------------
TIDY_COLUMNS: Final[tuple[str, ...]] = (
    "entity_name",
    "entity_code",
    "raw_entity_code",
    "subject_code",
    "combined_label",
    "short_name",
    "short_unit",
    "category",
    "year",
    "value",
    "estimates_start_after",
    "vintage",
    "source_row",
)

CATALOG_FILENAME: Final = "imf_weo_subject_catalog.csv"

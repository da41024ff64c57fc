"""
naming.py — File names for raw and tidy WEO artifacts.

Pattern: imf_weo_{year}_{month}_by_{country|group}_{raw|tidy}.{ext}

    artifact_name(2023, "apr", "country", "raw")            # imf_weo_2023_Apr_by_country_raw.csv
    artifact_name(2023, "Oct", "group", "tidy", "parquet")  # imf_weo_2023_Oct_by_group_tidy.parquet
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from weo_shared.constants import ENTITY_KINDS, OUTPUT_FORMATS
from weo_shared.time_utils import normalize_month

Stage = Literal["raw", "tidy"]

# Output format → file extension of the tidy artifact
TIDY_EXTENSIONS: dict[str, str] = {
    "long": "parquet",
    "wide": "csv",
}
RAW_EXTENSION = "csv"


def artifact_name(
    year: int,
    month: str,
    entity_kind: str,
    stage: Stage,
    ext: str | None = None,
) -> str:
    """Return the file name for one release artifact."""
    if entity_kind not in ENTITY_KINDS:
        raise ValueError(f"entity_kind must be one of {ENTITY_KINDS}, got {entity_kind!r}")
    if stage not in ("raw", "tidy"):
        raise ValueError(f"stage must be 'raw' or 'tidy', got {stage!r}")
    ext = ext or (RAW_EXTENSION if stage == "raw" else TIDY_EXTENSIONS["long"])
    return f"imf_weo_{int(year)}_{normalize_month(month)}_by_{entity_kind}_{stage}.{ext}"


def raw_path(data_dir: Path, year: int, month: str, entity_kind: str) -> Path:
    return Path(data_dir) / "raw" / artifact_name(year, month, entity_kind, "raw")


def tidy_path(
    data_dir: Path,
    year: int,
    month: str,
    entity_kind: str,
    output_format: str = "long",
) -> Path:
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}, got {output_format!r}")
    ext = TIDY_EXTENSIONS[output_format]
    return Path(data_dir) / "processed" / artifact_name(year, month, entity_kind, "tidy", ext)

"""
loaders/file_writer.py — Writes tidy WEO output and the catalog to disk.

Two tidy formats, chosen by the caller:
  long — one row per (entity, indicator, year), parquet, full precision
  wide — one row per (entity, indicator), one column per year, CSV

The subject-code catalog is written alongside as a CSV reference table.

Usage:
    from weo_pipeline.loaders.file_writer import FileWriter

    writer = FileWriter(data_dir=Path("./data"))
    result = writer.write_tidy(df, year=2023, month="Apr",
                               entity_kind="country", output_format="wide")
    print(result.path, result.rows_written)

    writer.write_catalog()
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

import polars as pl
import structlog

from weo_shared.catalog import CodeCatalog, default_catalog
from weo_shared.config import settings
from weo_shared.constants import CATALOG_FILENAME, OUTPUT_FORMATS, TIDY_COLUMNS
from weo_pipeline.naming import tidy_path

log = structlog.get_logger(__name__)

# Row keys of the wide format; source_row keeps distinct raw rows apart
WIDE_INDEX_COLUMNS: list[str] = [c for c in TIDY_COLUMNS if c not in ("year", "value")]


@dataclass
class WriteResult:
    """Summary of one file write."""

    path: Path
    output_format: str
    rows_written: int = 0
    columns: int = 0
    duration_ms: int = 0


def to_wide(df: pl.DataFrame) -> pl.DataFrame:
    """
    Pivot a tidy long table to one column per year.

    Year columns are named by the year ("1980", "1981", ...) and sorted.
    Duplicate (row key, year) pairs raise instead of being merged.
    """
    return df.pivot(
        on="year",
        index=WIDE_INDEX_COLUMNS,
        values="value",
        aggregate_function=None,
        sort_columns=True,
    )


class FileWriter:
    """Persists pipeline output under data_dir."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else settings.data_dir

    def write_tidy(
        self,
        df: pl.DataFrame,
        *,
        year: int,
        month: str,
        entity_kind: str,
        output_format: str = "long",
    ) -> WriteResult:
        """
        Write a tidy DataFrame in the requested format.

        Args:
            df:            Output of WeoReshaper.reshape().
            year:          Release year.
            month:         Release month.
            entity_kind:   "country" or "group".
            output_format: "long" (parquet) or "wide" (CSV).

        Returns:
            WriteResult with the written path and shape.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {output_format!r}"
            )

        t0 = time.monotonic()
        path = tidy_path(self._data_dir, year, month, entity_kind, output_format)
        path.parent.mkdir(parents=True, exist_ok=True)

        if output_format == "wide":
            out = to_wide(df)
            out.write_csv(path)
        else:
            out = df
            out.write_parquet(path)

        result = WriteResult(
            path=path,
            output_format=output_format,
            rows_written=len(out),
            columns=out.width,
            duration_ms=int((time.monotonic() - t0) * 1000),
        )
        log.info(
            "tidy_written",
            path=str(path),
            output_format=output_format,
            rows=result.rows_written,
            cols=result.columns,
        )
        return result

    def write_catalog(self, catalog: CodeCatalog | None = None) -> WriteResult:
        """Write the subject-code catalog as a CSV reference table."""
        t0 = time.monotonic()
        frame = (catalog if catalog is not None else default_catalog()).to_frame()
        path = self._data_dir / CATALOG_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        frame.write_csv(path)

        log.info("catalog_written", path=str(path), rows=len(frame))
        return WriteResult(
            path=path,
            output_format="csv",
            rows_written=len(frame),
            columns=frame.width,
            duration_ms=int((time.monotonic() - t0) * 1000),
        )

"""
pipelines/weo.py — IMF World Economic Outlook release pipeline.

Orchestrates:
  1. WeoSource.run → raw release table (downloaded only if not on disk),
     reshaped by WeoReshaper into the tidy schema (entity, indicator, year, value, vintage)
  2. FileWriter    → long parquet or wide CSV under data_dir/processed
  3. FileWriter    → subject-code catalog CSV next to the outputs

Usage:
    from weo_pipeline.pipelines.weo import run
    result = await run(year=2023, month="Apr", entity_kind="group", output_format="wide")
    print(result.output.path, result.tidy_rows)
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from weo_shared.catalog import default_catalog
from weo_shared.config import settings
from weo_shared.time_utils import make_vintage
from weo_pipeline.loaders.file_writer import FileWriter, WriteResult
from weo_pipeline.sources.imf_weo import WeoSource
from weo_pipeline.transforms.reshape import WeoReshaper
from weo_pipeline.utils.logging import get_logger

log = get_logger(__name__, pipeline="imf_weo")


@dataclass
class PipelineResult:
    """Summary of one pipeline run."""

    vintage: str
    entity_kind: str
    tidy_rows: int
    null_values: int
    output: WriteResult
    catalog: WriteResult | None = None
    duration_ms: int = 0


async def run(
    *,
    year: int,
    month: str,
    entity_kind: str = "country",
    output_format: str | None = None,
    data_dir: Path | None = None,
    force_download: bool = False,
    strict_catalog: bool | None = None,
    write_catalog: bool = True,
) -> PipelineResult:
    """
    Run the WEO pipeline end-to-end for one release and entity kind.

    Args:
        year:           Release year, e.g. 2023.
        month:          Release month, e.g. "Apr".
        entity_kind:    "country" or "group".
        output_format:  "long" or "wide" (default: settings.output_format).
        data_dir:       Root for raw/ and processed/ (default: settings.data_dir).
        force_download: Re-download even if the raw file exists.
        strict_catalog: Abort on subject codes missing from the catalog
                        (default: settings.strict_catalog).
        write_catalog:  Also write the catalog CSV.

    Returns:
        PipelineResult with row counts and written paths.
    """
    output_format = output_format or settings.output_format
    data_dir = Path(data_dir) if data_dir is not None else settings.data_dir
    strict = settings.strict_catalog if strict_catalog is None else strict_catalog
    vintage = make_vintage(year, month)

    run_log = log.bind(vintage=vintage, entity_kind=entity_kind, output_format=output_format)
    run_log.info("weo_pipeline_start", data_dir=str(data_dir), strict_catalog=strict)
    t0 = time.monotonic()

    catalog = default_catalog()
    source = WeoSource(
        data_dir=data_dir,
        reshaper=WeoReshaper(catalog, strict_catalog=strict),
    )
    writer = FileWriter(data_dir=data_dir)

    try:
        tidy = await source.run(
            year=year, month=month, entity_kind=entity_kind, force=force_download
        )
        output = writer.write_tidy(
            tidy,
            year=year,
            month=month,
            entity_kind=entity_kind,
            output_format=output_format,
        )
        catalog_result = writer.write_catalog(catalog) if write_catalog else None
    except Exception as exc:
        run_log.error("weo_pipeline_failed", error=str(exc), exc_info=True)
        raise

    result = PipelineResult(
        vintage=vintage,
        entity_kind=entity_kind,
        tidy_rows=len(tidy),
        null_values=tidy["value"].null_count(),
        output=output,
        catalog=catalog_result,
        duration_ms=int((time.monotonic() - t0) * 1000),
    )
    run_log.info(
        "weo_pipeline_complete",
        tidy_rows=result.tidy_rows,
        null_values=result.null_values,
        path=str(output.path),
        duration_ms=result.duration_ms,
    )
    return result

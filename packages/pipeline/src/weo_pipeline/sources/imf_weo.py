"""
sources/imf_weo.py — IMF World Economic Outlook database source adapter.

Downloads a WEO release (the full-database text file), stores it as a raw
CSV under data_dir/raw, and reshapes it into the tidy schema.

Release URL:
  {base_url}/{year}/WEO{Mon}{year}{suffix}.ashx
  suffix "all"  — by country (ISO3-coded rows)
  suffix "alla" — by country group (aggregates)

Release file format notes:
  - Tab-delimited text despite the .xls/.ashx name
  - Encoding varies by vintage: UTF-16 (with or without BOM), UTF-8, or latin-1
  - Country headers: WEO Country Code, ISO, WEO Subject Code, Country,
    Subject Descriptor, Subject Notes, Units, Scale,
    Country/Series-specific Notes, 1980 … 2028, Estimates Start After
  - Group headers replace ISO/Country with WEO Country Group Code and
    Country Group Name
  - Values use comma thousands separators; missing cells are "n/a" or "--"
  - The last line is a footer ("International Monetary Fund, World Economic
    Outlook Database, April 2023") with no subject code

Usage:
    source = WeoSource()
    df = await source.run(year=2023, month="Apr", entity_kind="country")
    # columns: entity_name, entity_code, subject_code, ..., year, value, vintage
"""

from __future__ import annotations

import codecs
import io
import time
from pathlib import Path
from typing import Any

import httpx
import polars as pl
import structlog

from weo_shared.config import settings
from weo_shared.constants import ENTITY_KINDS, SUBJECT_CODE_COL
from weo_shared.time_utils import normalize_month
from weo_pipeline.naming import raw_path
from weo_pipeline.transforms.normalize import (
    clean_string_columns,
    drop_blank_rows,
    to_snake_case,
)
from weo_pipeline.transforms.reshape import WeoReshaper
from weo_pipeline.utils.retry import with_retry

log = structlog.get_logger(__name__)

# Entity kind → release file suffix
RELEASE_SUFFIXES: dict[str, str] = {
    "country": "all",
    "group": "alla",
}


def decode_release(content: bytes) -> str:
    """Decode release bytes: UTF-16 by BOM or NUL bytes, else UTF-8, else latin-1."""
    if content.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return content.decode("utf-16")
    if b"\x00" in content[:512]:
        return content.decode("utf-16-le")
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return content.decode("latin-1")


def parse_release(text: str) -> pl.DataFrame:
    """
    Parse decoded release text into an all-text DataFrame.

    Cells are whitespace-trimmed. Blank header columns and footer rows
    (no subject code) are dropped.
    """
    df = pl.read_csv(
        io.BytesIO(text.encode("utf-8")),
        separator="\t",
        infer_schema_length=0,
        truncate_ragged_lines=True,
    )
    df = clean_string_columns(df.select([c for c in df.columns if c.strip()]))

    subject_cols = [c for c in df.columns if to_snake_case(c) == SUBJECT_CODE_COL]
    if subject_cols:
        df = drop_blank_rows(df, subject_cols[0])
    return df


def read_raw(path: Path) -> pl.DataFrame:
    """Read a stored raw release CSV with every column as text."""
    return pl.read_csv(path, infer_schema_length=0)


class WeoSource:
    """
    Downloads and reshapes IMF World Economic Outlook releases.

    One instance serves any number of releases; the raw file of each
    (year, month, entity kind) is downloaded at most once per data_dir.
    """

    name = "IMF-WEO"

    def __init__(
        self,
        *,
        data_dir: Path | None = None,
        reshaper: WeoReshaper | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = settings.imf_weo_base_url.rstrip("/")
        self._data_dir = Path(data_dir) if data_dir is not None else settings.data_dir
        self._reshaper = reshaper or WeoReshaper(strict_catalog=settings.strict_catalog)
        self._timeout = timeout if timeout is not None else settings.download_timeout
        self._log = log.bind(source_name=self.name)

    def release_url(self, year: int, month: str, entity_kind: str = "country") -> str:
        """Return the download URL of one release file."""
        if entity_kind not in ENTITY_KINDS:
            raise ValueError(f"entity_kind must be one of {ENTITY_KINDS}, got {entity_kind!r}")
        mon = normalize_month(month)
        suffix = RELEASE_SUFFIXES[entity_kind]
        return f"{self._base_url}/{int(year)}/WEO{mon}{int(year)}{suffix}.ashx"

    @with_retry(max_attempts=3, base_delay=1.0)
    async def _download(self, url: str) -> bytes:
        self._log.info("download_start", url=url)
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
        self._log.info("download_complete", url=url, size_bytes=len(response.content))
        return response.content

    async def extract(
        self,
        *,
        year: int,
        month: str,
        entity_kind: str = "country",
        force: bool = False,
    ) -> pl.DataFrame:
        """
        Return the raw release table, downloading it only if not stored yet.

        Args:
            year:        Release year.
            month:       Release month ("Apr", "October", ...).
            entity_kind: "country" or "group".
            force:       Re-download even if the raw file exists.

        Returns:
            Raw polars DataFrame, all columns String.
        """
        path = raw_path(self._data_dir, year, month, entity_kind)
        if path.exists() and not force:
            self._log.info("raw_file_found", path=str(path))
            return read_raw(path)

        content = await self._download(self.release_url(year, month, entity_kind))
        df = parse_release(decode_release(content))

        path.parent.mkdir(parents=True, exist_ok=True)
        df.write_csv(path)
        self._log.info("raw_file_written", path=str(path), rows=len(df), cols=df.width)
        return df

    def transform(
        self,
        raw: pl.DataFrame,
        *,
        year: int,
        month: str,
        entity_kind: str = "country",
    ) -> pl.DataFrame:
        return self._reshaper.reshape(raw, year=year, month=month, entity_kind=entity_kind)

    async def run(
        self,
        *,
        year: int,
        month: str,
        entity_kind: str = "country",
        force: bool = False,
    ) -> pl.DataFrame:
        """Extract then transform one release, logging row counts and timings."""
        run_log = self._log.bind(year=year, month=month, entity_kind=entity_kind)
        t0 = time.monotonic()
        try:
            raw = await self.extract(year=year, month=month, entity_kind=entity_kind, force=force)
            t1 = time.monotonic()
            tidy = self.transform(raw, year=year, month=month, entity_kind=entity_kind)
        except Exception as exc:
            run_log.error("source_run_failed", error=str(exc), exc_info=True)
            raise

        run_log.info(
            "source_run_complete",
            raw_rows=len(raw),
            tidy_rows=len(tidy),
            extract_ms=int((t1 - t0) * 1000),
            transform_ms=int((time.monotonic() - t1) * 1000),
        )
        return tidy

    def get_metadata(self) -> dict[str, Any]:
        return {
            "source_name": self.name,
            "base_url": self._base_url,
            "data_dir": str(self._data_dir),
            "description": "IMF World Economic Outlook database, by country and by country group",
        }

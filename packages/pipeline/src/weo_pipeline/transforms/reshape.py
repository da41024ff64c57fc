"""
transforms/reshape.py — Wide WEO release table → tidy long table.

The raw release has one row per (entity, subject code) and one text column
per year. WeoReshaper turns it into one row per (entity, indicator, year)
with readable labels, parsed numbers and the release vintage.

Country and group releases go through the same pipeline; the entity kind
only decides which column identifies the entity and whether ISO3 codes are
resolved to names.

Usage:
    from weo_pipeline.transforms.reshape import WeoReshaper

    reshaper = WeoReshaper()                     # default catalog + resolver
    tidy = reshaper.reshape(raw, year=2023, month="Apr", entity_kind="country")
    # columns: entity_name, entity_code, raw_entity_code, subject_code,
    #          combined_label, short_name, short_unit, category, year,
    #          value, estimates_start_after, vintage, source_row
"""

from __future__ import annotations

import warnings
from typing import Any

import polars as pl
import structlog

from weo_shared.catalog import CodeCatalog, default_catalog
from weo_shared.constants import (
    ENTITY_COLUMNS,
    ENTITY_KINDS,
    ESTIMATES_START_COL,
    RAW_CODE_COLUMNS,
    SOURCE_ROW_COL,
    SUBJECT_CODE_COL,
    TIDY_COLUMNS,
    EntityKind,
)
from weo_shared.countries import CountryNameResolver
from weo_shared.models.records import TIDY_SCHEMA
from weo_shared.time_utils import make_vintage
from weo_pipeline.errors import (
    MalformedInputError,
    UnparseableValueWarning,
    UnresolvedCodeError,
    UnresolvedCodeWarning,
    UnresolvedCountryWarning,
)
from weo_pipeline.transforms.normalize import (
    coerce_to_text,
    detect_year_columns,
    normalize_column_names,
)
from weo_pipeline.transforms.numeric import integer_expr, numeric_expr, unparseable_expr

log = structlog.get_logger(__name__)

_ROW_INDEX = "__row_nr"


def pivot_years(df: pl.DataFrame) -> pl.DataFrame:
    """
    Unpivot year columns into (year, value) rows.

    Year columns are every column named like a four-digit year; all other
    columns are carried along unchanged. Rows keep the source order, each
    source row followed by its years in ascending order.

    Args:
        df: Wide table. Any dtype; everything is coerced to text first.

    Returns:
        Long table with an Int64 "year" column and a String "value" column.

    Raises:
        MalformedInputError: if no year-like column exists.
    """
    text = coerce_to_text(df)
    year_cols = detect_year_columns(text.columns)
    if not year_cols:
        raise MalformedInputError(
            f"No year columns found; columns were: {text.columns}"
        )

    id_cols = [c for c in text.columns if c not in year_cols]
    long = (
        text.with_row_index(_ROW_INDEX)
        .unpivot(
            on=year_cols,
            index=[_ROW_INDEX, *id_cols],
            variable_name="year",
            value_name="value",
        )
        .with_columns(integer_expr("year").alias("year"))
        .sort([_ROW_INDEX, "year"], maintain_order=True)
        .drop(_ROW_INDEX)
    )
    return long


class WeoReshaper:
    """
    Reshapes one raw WEO release table into tidy records.

    The catalog and resolver are read-only and may be shared across
    reshapers and runs.
    """

    def __init__(
        self,
        catalog: CodeCatalog | None = None,
        resolver: CountryNameResolver | None = None,
        *,
        strict_catalog: bool = False,
    ) -> None:
        self._catalog = catalog if catalog is not None else default_catalog()
        self._resolver = resolver if resolver is not None else CountryNameResolver()
        self._strict_catalog = strict_catalog

    def reshape(
        self,
        raw: pl.DataFrame,
        *,
        year: int,
        month: str,
        entity_kind: EntityKind = "country",
    ) -> pl.DataFrame:
        """
        Transform a raw release into the tidy schema.

        Args:
            raw:         Raw wide table as read from the release file.
            year:        Release year, e.g. 2023.
            month:       Release month, e.g. "Apr".
            entity_kind: "country" (ISO3-coded rows) or "group" (aggregates).

        Returns:
            DataFrame with TIDY_COLUMNS, one row per raw row and year column.

        Raises:
            MalformedInputError: required columns missing or no year columns.
            UnresolvedCodeError: strict_catalog is set and a subject code is unknown.
        """
        if entity_kind not in ENTITY_KINDS:
            raise ValueError(f"entity_kind must be one of {ENTITY_KINDS}, got {entity_kind!r}")

        vintage = make_vintage(year, month)
        run_log = log.bind(vintage=vintage, entity_kind=entity_kind)

        df = normalize_column_names(coerce_to_text(raw))
        self._check_required_columns(df, entity_kind)
        df = df.with_row_index(SOURCE_ROW_COL)

        long = pivot_years(df)
        n_years = len(detect_year_columns(df.columns))
        run_log.debug("years_unpivoted", raw_rows=len(df), year_columns=n_years, rows=len(long))

        self._warn_unparseable(long, run_log)

        if ESTIMATES_START_COL not in long.columns:
            long = long.with_columns(pl.lit(None, dtype=pl.String).alias(ESTIMATES_START_COL))

        subject = pl.col(SUBJECT_CODE_COL).str.strip_chars()
        long = long.with_columns(
            numeric_expr("value").alias("value"),
            integer_expr(ESTIMATES_START_COL).alias("estimates_start_after"),
            pl.when(subject != "").then(subject).alias("subject_code"),
        )

        long = self._add_entity(long, entity_kind, run_log)
        long = self._enrich(long, run_log)

        tidy = long.with_columns(pl.lit(vintage).alias("vintage")).select(
            [pl.col(c).cast(TIDY_SCHEMA[c]) for c in TIDY_COLUMNS]
        )

        run_log.info(
            "reshape_complete",
            raw_rows=len(raw),
            year_columns=n_years,
            tidy_rows=len(tidy),
            null_values=tidy["value"].null_count(),
        )
        return tidy

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _check_required_columns(df: pl.DataFrame, entity_kind: str) -> None:
        required = [ENTITY_COLUMNS[entity_kind], SUBJECT_CODE_COL]
        missing = [c for c in required if c not in df.columns]
        if missing:
            raise MalformedInputError(
                f"Raw {entity_kind} table is missing required columns {missing}; "
                f"columns were: {df.columns}"
            )

    def _add_entity(
        self,
        df: pl.DataFrame,
        entity_kind: str,
        run_log: Any,
    ) -> pl.DataFrame:
        entity_col = ENTITY_COLUMNS[entity_kind]
        code_col = RAW_CODE_COLUMNS[entity_kind]
        if code_col in df.columns:
            raw_code = pl.col(code_col).str.strip_chars()
            df = df.with_columns(pl.when(raw_code != "").then(raw_code).alias("raw_entity_code"))
        else:
            df = df.with_columns(pl.lit(None, dtype=pl.String).alias("raw_entity_code"))

        if entity_kind == "group":
            return df.with_columns(
                pl.col(entity_col).str.strip_chars().alias("entity_name"),
                pl.lit(None, dtype=pl.String).alias("entity_code"),
            )

        codes = pl.col(entity_col).str.strip_chars().str.to_uppercase()
        df = df.with_columns(
            pl.when(codes.str.contains(r"^[A-Z]{3}$"))
            .then(codes)
            .otherwise(pl.lit(None, dtype=pl.String))
            .alias("entity_code")
        )

        names = self._resolver.resolve_many(df["entity_code"].unique().to_list())
        df = df.with_columns(
            pl.col("entity_code")
            .replace_strict(names, default=None, return_dtype=pl.String)
            .alias("entity_name")
        )

        unresolved = sorted(
            set(df.filter(pl.col("entity_name").is_null())["raw_entity_code"].drop_nulls().to_list())
        )
        if unresolved:
            run_log.warning("unresolved_countries", count=len(unresolved), codes=unresolved)
            warnings.warn(
                f"{len(unresolved)} country codes could not be resolved to a name: "
                f"{', '.join(unresolved)}",
                UnresolvedCountryWarning,
                stacklevel=3,
            )
        return df

    def _enrich(
        self,
        df: pl.DataFrame,
        run_log: Any,
    ) -> pl.DataFrame:
        unknown = sorted(
            set(df["subject_code"].drop_nulls().unique().to_list()) - self._catalog.codes
        )
        if unknown:
            if self._strict_catalog:
                run_log.error("unresolved_subject_codes", count=len(unknown), codes=unknown)
                raise UnresolvedCodeError(unknown)
            run_log.warning("unresolved_subject_codes", count=len(unknown), codes=unknown)
            warnings.warn(
                f"{len(unknown)} subject codes have no catalog entry: {', '.join(unknown)}",
                UnresolvedCodeWarning,
                stacklevel=3,
            )

        return (
            df.with_row_index(_ROW_INDEX)
            .join(self._catalog.to_frame(), on="subject_code", how="left")
            .sort(_ROW_INDEX)
            .drop(_ROW_INDEX)
        )

    @staticmethod
    def _warn_unparseable(
        df: pl.DataFrame,
        run_log: Any,
    ) -> None:
        count = df.select(unparseable_expr("value").sum()).item()
        if count:
            run_log.warning("unparseable_values", count=count)
            warnings.warn(
                f"{count} cells could not be parsed as numbers and were set to null",
                UnparseableValueWarning,
                stacklevel=3,
            )

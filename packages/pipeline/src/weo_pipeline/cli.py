"""
cli.py — Click CLI entrypoint for the WEO pipeline.

Usage:
    weo run --year 2023 --month Apr
    weo run --year 2023 --month Oct --by group --format wide
    weo run --year 2024 --month Apr --force --strict-catalog
    weo catalog --data-dir ./data
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click
import structlog

from weo_shared.config import settings
from weo_shared.constants import ENTITY_KINDS, OUTPUT_FORMATS
from weo_pipeline.errors import WeoPipelineError
from weo_pipeline.utils.logging import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=settings.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level",
)
@click.option(
    "--log-format",
    default=settings.log_format,
    type=click.Choice(["json", "console"]),
    help="Log renderer",
)
def main(log_level: str, log_format: str) -> None:
    """IMF World Economic Outlook download and tidy pipeline."""
    configure_logging(log_level=log_level, log_format=log_format)


@main.command()
@click.option("--year", required=True, type=click.IntRange(1990, 2100), help="Release year")
@click.option("--month", required=True, help="Release month, e.g. Apr or October")
@click.option(
    "--by",
    "entity_kind",
    default="country",
    show_default=True,
    type=click.Choice(ENTITY_KINDS),
    help="Release granularity",
)
@click.option(
    "--format",
    "output_format",
    default=settings.output_format,
    show_default=True,
    type=click.Choice(OUTPUT_FORMATS),
    help="long = parquet, one row per year; wide = CSV, one column per year",
)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Root directory for raw/ and processed/ files",
)
@click.option("--force", is_flag=True, help="Re-download the release even if stored")
@click.option(
    "--strict-catalog/--lenient-catalog",
    default=settings.strict_catalog,
    help="Fail on subject codes missing from the catalog",
)
def run(
    year: int,
    month: str,
    entity_kind: str,
    output_format: str,
    data_dir: Path | None,
    force: bool,
    strict_catalog: bool,
) -> None:
    """Download (if needed), reshape and write one WEO release."""
    from weo_pipeline.pipelines.weo import run as run_weo
    from weo_shared.time_utils import normalize_month

    try:
        normalize_month(month)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--month") from exc

    click.echo(f"Running WEO pipeline: {year} {month} by {entity_kind}")
    log.info("cli_run", year=year, month=month, entity_kind=entity_kind, output_format=output_format)
    try:
        result = asyncio.run(
            run_weo(
                year=year,
                month=month,
                entity_kind=entity_kind,
                output_format=output_format,
                data_dir=data_dir,
                force_download=force,
                strict_catalog=strict_catalog,
            )
        )
    except WeoPipelineError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(
        f"  ✓ {result.vintage}: {result.tidy_rows} rows "
        f"({result.null_values} missing) → {result.output.path}"
    )


@main.command()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the catalog into",
)
def catalog(data_dir: Path | None) -> None:
    """Write the subject-code catalog CSV."""
    from weo_pipeline.loaders.file_writer import FileWriter

    result = FileWriter(data_dir=data_dir).write_catalog()
    click.echo(f"  ✓ {result.rows_written} subject codes → {result.path}")


if __name__ == "__main__":
    main()

"""
tests/test_pipelines/test_weo.py — Integration tests for the WEO pipeline.

Raw release files are placed in tmp_path ahead of the run, so the pipeline
reads them from disk and no HTTP request is made.
"""

from __future__ import annotations

import polars as pl
import pytest
import respx

from weo_pipeline.errors import UnresolvedCodeError
from weo_pipeline.naming import raw_path
from weo_pipeline.pipelines.weo import run


@pytest.fixture
def stored_country(tmp_path, weo_country_raw: pl.DataFrame):
    path = raw_path(tmp_path, 2023, "Apr", "country")
    path.parent.mkdir(parents=True)
    weo_country_raw.write_csv(path)
    return tmp_path


@pytest.fixture
def stored_group(tmp_path, weo_group_raw: pl.DataFrame):
    path = raw_path(tmp_path, 2023, "Apr", "group")
    path.parent.mkdir(parents=True)
    weo_group_raw.write_csv(path)
    return tmp_path


class TestWeoPipeline:
    @pytest.mark.asyncio
    async def test_long_output(self, stored_country):
        with respx.mock() as router, pytest.warns(UserWarning):
            result = await run(
                year=2023, month="Apr", entity_kind="country",
                output_format="long", data_dir=stored_country, strict_catalog=False,
            )
            assert not router.calls

        assert result.vintage == "2023 - Apr"
        assert result.tidy_rows == 15
        assert result.null_values == 2
        assert result.output.path.suffix == ".parquet"
        assert len(pl.read_parquet(result.output.path)) == 15

    @pytest.mark.asyncio
    async def test_writes_catalog(self, stored_group):
        result = await run(
            year=2023, month="Apr", entity_kind="group",
            output_format="wide", data_dir=stored_group,
        )
        assert result.catalog is not None
        assert result.catalog.path.exists()
        assert result.output.rows_written == 3

    @pytest.mark.asyncio
    async def test_skip_catalog(self, stored_group):
        result = await run(
            year=2023, month="Apr", entity_kind="group",
            data_dir=stored_group, write_catalog=False,
        )
        assert result.catalog is None
        assert not (stored_group / "imf_weo_subject_catalog.csv").exists()

    @pytest.mark.asyncio
    async def test_strict_catalog_aborts(self, stored_country):
        with pytest.raises(UnresolvedCodeError):
            await run(
                year=2023, month="Apr", entity_kind="country",
                data_dir=stored_country, strict_catalog=True,
            )
        assert not (stored_country / "processed").exists()

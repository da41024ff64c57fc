"""
weo_pipeline — IMF World Economic Outlook download and tidy-reshape pipeline.

Architecture:
  sources/     — WEO release download, decoding and raw parsing
  transforms/  — numeric string parsing and the wide-to-tidy reshaper
  loaders/     — tidy (long parquet / wide CSV) and catalog file writers
  pipelines/   — orchestrator that wires source -> reshaper -> writer
  utils/       — structlog configuration, exponential-backoff retry decorator

Quick start:
    from weo_pipeline.pipelines.weo import run
    import asyncio
    result = asyncio.run(run(year=2023, month="Apr", entity_kind="country"))

CLI:
    weo run --year 2023 --month Apr --by country --format long
    weo catalog

Shared code from weo_shared:
    from weo_shared.config import settings
    from weo_shared.catalog import default_catalog
    from weo_shared.countries import CountryNameResolver
"""

__version__ = "0.1.0"

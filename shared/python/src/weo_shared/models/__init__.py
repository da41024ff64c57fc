"""
weo_shared.models — Catalog entry model and the tidy output schema.

These are used by:
- weo_shared.catalog: the embedded subject-code lookup table
- weo_pipeline: TIDY_SCHEMA for the reshaped polars DataFrame
"""

from weo_shared.models.catalog import CodeCatalogEntry
from weo_shared.models.records import TIDY_SCHEMA

__all__ = [
    "CodeCatalogEntry",
    "TIDY_SCHEMA",
]

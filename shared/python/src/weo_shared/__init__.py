"""
weo_shared — shared configuration, constants, models, and lookup tables for
the IMF World Economic Outlook pipeline.

Usage:
    from weo_shared.config import settings
    from weo_shared.catalog import CodeCatalog, default_catalog
    from weo_shared.countries import CountryNameResolver
    from weo_shared.models import CodeCatalogEntry, TIDY_SCHEMA
    from weo_shared.constants import TIDY_COLUMNS, MISSING_MARKERS
"""

__version__ = "0.1.0"

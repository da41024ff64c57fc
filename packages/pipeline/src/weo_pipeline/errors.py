"""
errors.py — Exceptions and warnings raised by the WEO pipeline.

Only the exceptions abort a run. Per-record problems are reported as
warnings (one per run, with counts) and the affected cells become null.
"""

from __future__ import annotations


class WeoPipelineError(Exception):
    """Base class for fatal pipeline errors."""


class MalformedInputError(WeoPipelineError, ValueError):
    """Raw table lacks required columns or has no year columns."""


class UnresolvedCodeError(WeoPipelineError):
    """Subject codes missing from the catalog while running in strict mode."""

    def __init__(self, codes: list[str]) -> None:
        self.codes = sorted(codes)
        super().__init__(f"Subject codes not in catalog: {', '.join(self.codes)}")


class WeoDataWarning(UserWarning):
    """Base class for recovered, per-record data problems."""


class UnparseableValueWarning(WeoDataWarning):
    """Cells that were not missing markers but did not parse as numbers."""


class UnresolvedCodeWarning(WeoDataWarning):
    """Subject codes with no catalog entry; labels left null."""


class UnresolvedCountryWarning(WeoDataWarning):
    """ISO3 codes with no name; entity_name left null."""

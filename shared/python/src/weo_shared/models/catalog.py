"""
models/catalog.py — Pydantic model for one subject-code catalog entry.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CodeCatalogEntry(BaseModel):
    """Readable labels for one WEO subject code."""

    model_config = ConfigDict(frozen=True)

    subject_code: str               # e.g. "NGDP_R"
    short_name: str                 # e.g. "Real GDP"
    short_unit: str                 # e.g. "bn local currency"
    combined_label: str             # e.g. "Real GDP (bn local currency)"
    category: str                   # e.g. "GDP"

    def to_row(self) -> dict[str, Any]:
        return self.model_dump()

"""
catalog.py — Embedded WEO subject-code catalog.

The catalog is versioned with the package and is the only source of readable
labels for WEO subject codes. It is never fetched or inferred from a release;
codes a release carries that are not listed here pass through the reshaper
with null labels.

Usage:
    from weo_shared.catalog import default_catalog

    catalog = default_catalog()
    entry = catalog.get("NGDP_R")
    entry.short_name      # "Real GDP"
    df = catalog.to_frame()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Final

import polars as pl

from weo_shared.models.catalog import CodeCatalogEntry

# ---------------------------------------------------------------------------
# subject_code → (short_name, short_unit, combined_label, category)
# ---------------------------------------------------------------------------
SUBJECT_CODES: Final[dict[str, tuple[str, str, str, str]]] = {
    # GDP
    "NGDP_R": ("Real GDP", "bn local currency", "Real GDP (bn local currency)", "GDP"),
    "NGDP_RPCH": ("Real GDP growth", "% change", "Real GDP growth (% change)", "GDP"),
    "NGDP": ("Nominal GDP", "bn local currency", "Nominal GDP (bn local currency)", "GDP"),
    "NGDPD": ("Nominal GDP", "bn USD", "Nominal GDP (bn USD)", "GDP"),
    "PPPGDP": ("GDP (PPP)", "bn int. USD", "GDP (PPP) (bn int. USD)", "GDP"),
    "NGAP_NPGDP": ("Output gap", "% of potential GDP", "Output gap (% of potential GDP)", "GDP"),
    "PPPSH": ("Share of world GDP (PPP)", "%", "Share of world GDP (PPP) (%)", "GDP"),
    # GDP per capita
    "NGDPRPC": (
        "Real GDP per capita",
        "local currency",
        "Real GDP per capita (local currency)",
        "GDP per capita",
    ),
    "NGDPRPPPPC": (
        "Real GDP per capita (PPP)",
        "2017 int. USD",
        "Real GDP per capita (PPP) (2017 int. USD)",
        "GDP per capita",
    ),
    "NGDPPC": (
        "Nominal GDP per capita",
        "local currency",
        "Nominal GDP per capita (local currency)",
        "GDP per capita",
    ),
    "NGDPDPC": (
        "Nominal GDP per capita",
        "USD",
        "Nominal GDP per capita (USD)",
        "GDP per capita",
    ),
    "PPPPC": (
        "GDP per capita (PPP)",
        "int. USD",
        "GDP per capita (PPP) (int. USD)",
        "GDP per capita",
    ),
    # Prices
    "NGDP_D": ("GDP deflator", "index", "GDP deflator (index)", "Prices"),
    "PPPEX": (
        "PPP conversion rate",
        "local currency per int. USD",
        "PPP conversion rate (local currency per int. USD)",
        "Prices",
    ),
    "PCPI": ("CPI (average)", "index", "CPI (average) (index)", "Inflation"),
    "PCPIPCH": ("Inflation (average)", "% change", "Inflation (average) (% change)", "Inflation"),
    "PCPIE": ("CPI (end of period)", "index", "CPI (end of period) (index)", "Inflation"),
    "PCPIEPCH": (
        "Inflation (end of period)",
        "% change",
        "Inflation (end of period) (% change)",
        "Inflation",
    ),
    # Interest rates
    "FLIBOR6": ("6-month LIBOR", "%", "6-month LIBOR (%)", "Interest rates"),
    # Savings and investment
    "NID_NGDP": (
        "Total investment",
        "% of GDP",
        "Total investment (% of GDP)",
        "Savings and investment",
    ),
    "NGSD_NGDP": (
        "Gross national savings",
        "% of GDP",
        "Gross national savings (% of GDP)",
        "Savings and investment",
    ),
    # Trade
    "TM_RPCH": (
        "Import volume (goods and services)",
        "% change",
        "Import volume (goods and services) (% change)",
        "Trade",
    ),
    "TMG_RPCH": (
        "Import volume (goods)",
        "% change",
        "Import volume (goods) (% change)",
        "Trade",
    ),
    "TX_RPCH": (
        "Export volume (goods and services)",
        "% change",
        "Export volume (goods and services) (% change)",
        "Trade",
    ),
    "TXG_RPCH": (
        "Export volume (goods)",
        "% change",
        "Export volume (goods) (% change)",
        "Trade",
    ),
    # Labour market and population
    "LUR": ("Unemployment rate", "% of labor force", "Unemployment rate (% of labor force)", "Employment"),
    "LE": ("Employment", "mn persons", "Employment (mn persons)", "Employment"),
    "LP": ("Population", "mn persons", "Population (mn persons)", "Population"),
    # General government
    "GGR": (
        "Government revenue",
        "bn local currency",
        "Government revenue (bn local currency)",
        "Fiscal",
    ),
    "GGR_NGDP": ("Government revenue", "% of GDP", "Government revenue (% of GDP)", "Fiscal"),
    "GGX": (
        "Government expenditure",
        "bn local currency",
        "Government expenditure (bn local currency)",
        "Fiscal",
    ),
    "GGX_NGDP": (
        "Government expenditure",
        "% of GDP",
        "Government expenditure (% of GDP)",
        "Fiscal",
    ),
    "GGXCNL": (
        "Government net lending/borrowing",
        "bn local currency",
        "Government net lending/borrowing (bn local currency)",
        "Fiscal",
    ),
    "GGXCNL_NGDP": (
        "Government net lending/borrowing",
        "% of GDP",
        "Government net lending/borrowing (% of GDP)",
        "Fiscal",
    ),
    "GGSB": (
        "Structural balance",
        "bn local currency",
        "Structural balance (bn local currency)",
        "Fiscal",
    ),
    "GGSB_NPGDP": (
        "Structural balance",
        "% of potential GDP",
        "Structural balance (% of potential GDP)",
        "Fiscal",
    ),
    "GGXONLB": (
        "Primary net lending/borrowing",
        "bn local currency",
        "Primary net lending/borrowing (bn local currency)",
        "Fiscal",
    ),
    "GGXONLB_NGDP": (
        "Primary net lending/borrowing",
        "% of GDP",
        "Primary net lending/borrowing (% of GDP)",
        "Fiscal",
    ),
    "NGDP_FY": (
        "Nominal GDP (fiscal year)",
        "bn local currency",
        "Nominal GDP (fiscal year) (bn local currency)",
        "Fiscal",
    ),
    # Government debt
    "GGXWDN": (
        "Government net debt",
        "bn local currency",
        "Government net debt (bn local currency)",
        "Debt",
    ),
    "GGXWDN_NGDP": ("Government net debt", "% of GDP", "Government net debt (% of GDP)", "Debt"),
    "GGXWDG": (
        "Government gross debt",
        "bn local currency",
        "Government gross debt (bn local currency)",
        "Debt",
    ),
    "GGXWDG_NGDP": (
        "Government gross debt",
        "% of GDP",
        "Government gross debt (% of GDP)",
        "Debt",
    ),
    # External
    "BCA": ("Current account balance", "bn USD", "Current account balance (bn USD)", "External"),
    "BCA_NGDPD": (
        "Current account balance",
        "% of GDP",
        "Current account balance (% of GDP)",
        "External",
    ),
}


class CodeCatalog:
    """
    Read-only lookup from WEO subject code to readable labels.

    Construct once per process (see default_catalog()) and pass into the
    reshaper; instances hold no mutable state.
    """

    def __init__(self, entries: Iterable[CodeCatalogEntry]) -> None:
        by_code: dict[str, CodeCatalogEntry] = {}
        for entry in entries:
            if entry.subject_code in by_code:
                raise ValueError(f"Duplicate subject code in catalog: {entry.subject_code!r}")
            by_code[entry.subject_code] = entry
        self._entries = by_code

    @classmethod
    def from_mapping(cls, mapping: dict[str, tuple[str, str, str, str]]) -> "CodeCatalog":
        return cls(
            CodeCatalogEntry(
                subject_code=code,
                short_name=short_name,
                short_unit=short_unit,
                combined_label=combined_label,
                category=category,
            )
            for code, (short_name, short_unit, combined_label, category) in mapping.items()
        )

    def get(self, subject_code: str | None) -> CodeCatalogEntry | None:
        if not subject_code:
            return None
        return self._entries.get(subject_code)

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(self._entries)

    def __contains__(self, subject_code: object) -> bool:
        return subject_code in self._entries

    def __iter__(self) -> Iterator[CodeCatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def to_frame(self) -> pl.DataFrame:
        """Return the catalog as a polars DataFrame, one row per subject code."""
        return pl.DataFrame(
            [entry.to_row() for entry in self],
            schema={
                "subject_code": pl.String,
                "short_name": pl.String,
                "short_unit": pl.String,
                "combined_label": pl.String,
                "category": pl.String,
            },
        )


@lru_cache(maxsize=1)
def default_catalog() -> CodeCatalog:
    """The catalog shipped with this package, built once per process."""
    return CodeCatalog.from_mapping(SUBJECT_CODES)

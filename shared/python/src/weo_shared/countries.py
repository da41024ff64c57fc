"""
countries.py — ISO3 country code → display name resolution.

The WEO country release identifies countries by ISO 3166-1 alpha-3 code.
Names come from pycountry, preferring its common name ("Bolivia") over the
official short name ("Bolivia, Plurinational State of") where it has one.
The IMF also uses codes pycountry does not know; those are covered by
COUNTRY_NAME_OVERRIDES, which always win.

Usage:
    from weo_shared.countries import CountryNameResolver, is_iso3

    resolver = CountryNameResolver()
    resolver.resolve("USA")    # "United States"
    resolver.resolve("UVK")    # "Kosovo"
    resolver.resolve("ZZZ")    # None
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

import pycountry

# IMF codes with no (or a different) ISO 3166 entry
COUNTRY_NAME_OVERRIDES: Final[dict[str, str]] = {
    "UVK": "Kosovo",
    "WBG": "West Bank and Gaza",
}

_ISO3_RE = re.compile(r"^[A-Z]{3}$")


def is_iso3(code: str | None) -> bool:
    """Return True if code looks like an upper-case alpha-3 code."""
    return bool(code) and bool(_ISO3_RE.match(code))


class CountryNameResolver:
    """
    Maps ISO3 codes to display names.

    Lookups are memoised per instance; the pycountry database is read-only.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._overrides = dict(COUNTRY_NAME_OVERRIDES if overrides is None else overrides)
        self._cache: dict[str, str | None] = {}

    def resolve(self, code: str | None) -> str | None:
        """Return the display name for code, or None when it cannot be resolved."""
        if not code:
            return None
        code = code.strip().upper()
        if code in self._overrides:
            return self._overrides[code]
        if code not in self._cache:
            self._cache[code] = self._lookup(code)
        return self._cache[code]

    def resolve_many(self, codes: Iterable[str | None]) -> dict[str, str | None]:
        """Resolve each distinct non-empty code once."""
        return {code: self.resolve(code) for code in set(codes) if code}

    @staticmethod
    def _lookup(code: str) -> str | None:
        if not is_iso3(code):
            return None
        country = pycountry.countries.get(alpha_3=code)
        if country is None:
            return None
        return getattr(country, "common_name", None) or country.name

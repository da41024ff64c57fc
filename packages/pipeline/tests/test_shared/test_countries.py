"""
tests/test_shared/test_countries.py — Tests for ISO3 → country name resolution.
"""

from __future__ import annotations

import pycountry
import pytest

from weo_shared.countries import COUNTRY_NAME_OVERRIDES, CountryNameResolver, is_iso3


class TestCountryNameResolver:
    def test_standard_code(self):
        assert CountryNameResolver().resolve("USA") == "United States"

    def test_prefers_common_name(self):
        bolivia = pycountry.countries.get(alpha_3="BOL")
        expected = getattr(bolivia, "common_name", None) or bolivia.name
        assert CountryNameResolver().resolve("BOL") == expected

    def test_kosovo_override(self):
        assert CountryNameResolver().resolve("UVK") == "Kosovo"

    def test_west_bank_and_gaza_override(self):
        assert CountryNameResolver().resolve("WBG") == "West Bank and Gaza"

    def test_overrides_win_over_standard_table(self):
        resolver = CountryNameResolver(overrides={**COUNTRY_NAME_OVERRIDES, "USA": "America"})
        assert resolver.resolve("USA") == "America"

    def test_lowercase_and_whitespace(self):
        assert CountryNameResolver().resolve(" deu ") == "Germany"

    @pytest.mark.parametrize("code", ["ZZZ", "XX", "", None, "12A"])
    def test_unknown_is_none(self, code):
        assert CountryNameResolver().resolve(code) is None

    def test_resolve_many_skips_empty(self):
        result = CountryNameResolver().resolve_many(["USA", None, "UVK", "USA", ""])
        assert result == {"USA": "United States", "UVK": "Kosovo"}


class TestIsIso3:
    @pytest.mark.parametrize("code, expected", [("USA", True), ("usa", False), ("US", False), ("", False), (None, False)])
    def test_codes(self, code, expected):
        assert is_iso3(code) is expected

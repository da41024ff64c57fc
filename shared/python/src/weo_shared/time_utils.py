"""
time_utils.py — Release month parsing and vintage labels.

WEO releases are identified by year and month ("2023", "Apr"). Callers pass
months in whatever spelling they have; everything downstream uses the
three-letter English abbreviation.

Usage:
    from weo_shared.time_utils import normalize_month, make_vintage

    normalize_month("april")      # "Apr"
    normalize_month("OCT")        # "Oct"
    make_vintage(2023, "Apr")     # "2023 - Apr"
"""

from __future__ import annotations

# Month name → canonical abbreviation
_MONTH_NAMES: dict[str, str] = {
    "january": "Jan", "jan": "Jan", "jan.": "Jan",
    "february": "Feb", "feb": "Feb", "feb.": "Feb",
    "march": "Mar", "mar": "Mar", "mar.": "Mar",
    "april": "Apr", "apr": "Apr", "apr.": "Apr",
    "may": "May",
    "june": "Jun", "jun": "Jun", "jun.": "Jun",
    "july": "Jul", "jul": "Jul", "jul.": "Jul",
    "august": "Aug", "aug": "Aug", "aug.": "Aug",
    "september": "Sep", "sep": "Sep", "sep.": "Sep", "sept": "Sep",
    "october": "Oct", "oct": "Oct", "oct.": "Oct",
    "november": "Nov", "nov": "Nov", "nov.": "Nov",
    "december": "Dec", "dec": "Dec", "dec.": "Dec",
}


def normalize_month(month: str) -> str:
    """
    Return the three-letter abbreviation for a month name.

    Raises:
        ValueError: if month is not a recognisable English month.
    """
    key = str(month).strip().lower()
    try:
        return _MONTH_NAMES[key]
    except KeyError:
        raise ValueError(f"Unrecognised release month: {month!r}") from None


def make_vintage(year: int, month: str) -> str:
    """Release identifier stamped on every tidy row, e.g. "2023 - Apr"."""
    return f"{int(year)} - {normalize_month(month)}"

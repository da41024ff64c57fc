"""
weo_pipeline.transforms — numeric parsing, column normalization, and the
wide-to-tidy WEO reshaper.
"""

from weo_pipeline.transforms.numeric import numeric_expr, parse_numeric_string
from weo_pipeline.transforms.reshape import WeoReshaper, pivot_years

__all__ = [
    "WeoReshaper",
    "pivot_years",
    "numeric_expr",
    "parse_numeric_string",
]

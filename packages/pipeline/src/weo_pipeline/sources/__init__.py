"""
weo_pipeline.sources — data source adapters.

  WeoSource — IMF World Economic Outlook database (tab-delimited release files)
"""

from weo_pipeline.sources.imf_weo import WeoSource

__all__ = ["WeoSource"]

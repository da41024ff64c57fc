"""weo_pipeline.loaders — writers for tidy output and the catalog."""

from weo_pipeline.loaders.file_writer import FileWriter, WriteResult

__all__ = ["FileWriter", "WriteResult"]

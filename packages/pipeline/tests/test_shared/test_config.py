"""
tests/test_shared/test_config.py — Tests for environment-driven settings.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from weo_shared.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("WEO_OUTPUT_FORMAT", "WEO_STRICT_CATALOG", "WEO_DATA_DIR"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.output_format == "long"
        assert s.strict_catalog is False
        assert s.data_dir == Path("./data")

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WEO_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("WEO_STRICT_CATALOG", "true")
        monkeypatch.setenv("WEO_OUTPUT_FORMAT", "wide")
        s = Settings(_env_file=None)
        assert s.data_dir == tmp_path
        assert s.strict_catalog is True
        assert s.output_format == "wide"

    def test_base_url_trailing_slash_stripped(self, monkeypatch):
        monkeypatch.setenv("WEO_IMF_WEO_BASE_URL", "https://example.org/weo/")
        assert Settings(_env_file=None).imf_weo_base_url == "https://example.org/weo"

    def test_invalid_output_format(self, monkeypatch):
        monkeypatch.setenv("WEO_OUTPUT_FORMAT", "xlsx")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("WEO_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_timeout_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("WEO_DOWNLOAD_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

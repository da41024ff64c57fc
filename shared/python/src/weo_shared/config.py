"""
config.py — Runtime settings for the WEO pipeline.

Values come from WEO_-prefixed environment variables or the nearest .env
file above the working directory. CLI flags override them per run.

    WEO_DATA_DIR=/srv/weo          root for raw/ and processed/
    WEO_OUTPUT_FORMAT=wide         long (parquet) | wide (CSV)
    WEO_STRICT_CATALOG=true        fail on subject codes missing from the catalog
    WEO_LOG_FORMAT=json            json | console

Usage:
    from weo_shared.config import settings
    settings.data_dir / "raw"
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _nearest_dotenv() -> Path | None:
    cwd = Path.cwd()
    return next(
        (d / ".env" for d in (cwd, *cwd.parents) if (d / ".env").is_file()),
        None,
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEO_",
        env_file=_nearest_dotenv(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Release download
    imf_weo_base_url: str = "https://www.imf.org/-/media/Files/Publications/WEO/WEO-Database"
    download_timeout: float = Field(default=120.0, gt=0, description="Seconds per request")

    # Storage and output
    data_dir: Path = Path("./data")
    output_format: Literal["long", "wide"] = "long"
    strict_catalog: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("imf_weo_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("data_dir")
    @classmethod
    def _expand_home(cls, v: Path) -> Path:
        return v.expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


settings = Settings()

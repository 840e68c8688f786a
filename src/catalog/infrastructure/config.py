"""Application settings, read from the environment or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog settings. Every field can be overridden with ``CATALOG_<NAME>``."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("data"), description="Directory holding products.json")
    log_level: str = Field(default="WARNING", description="Logging level")
    default_page_size: int = Field(default=10, gt=0, description="Products per page when listing")

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Application settings, read from the environment (``MYSHOP_*``) or ``.env``."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="MYSHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.DEVELOPMENT
    log_level: str | None = Field(
        default=None,
        description="Overrides the per-environment default log level",
    )
    data_dir: Path = _DEFAULT_DATA_DIR
    currency: str = "BRL"

    # Pricing rules
    free_shipping_threshold: Decimal = Field(default=Decimal("200.00"), ge=0)
    standard_shipping_cost: Decimal = Field(default=Decimal("15.00"), ge=0)
    large_order_threshold: Decimal = Field(default=Decimal("500.00"), ge=0)
    large_order_discount_rate: Decimal = Field(default=Decimal("0.10"), ge=0, le=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()

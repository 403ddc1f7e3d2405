"""
DecimalAmount - Library Configuration
Arithmetic defaults loaded from environment variables via pydantic-settings.
"""

from __future__ import annotations

import decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_DOWN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_CEILING,
        decimal.ROUND_FLOOR,
        decimal.ROUND_UP,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_05UP,
    }
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DECIMAL_AMOUNT_",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Rounding ──────────────────────────────────────────────────────────────
    DEFAULT_PRECISION: int = 2  # decimal places kept by mul/div/formatting
    ROUNDING_MODE: str = decimal.ROUND_HALF_UP  # ties away from zero

    # ── Division ──────────────────────────────────────────────────────────────
    # Decimal places kept by a quotient that feeds further arithmetic (divmul)
    # and the most places any quotient is computed to
    DIVISION_PRECISION: int = 28

    @field_validator("DEFAULT_PRECISION")
    @classmethod
    def validate_default_precision(cls, v: int) -> int:
        if v < 0:
            raise ValueError("DEFAULT_PRECISION must be >= 0")
        return v

    @field_validator("ROUNDING_MODE")
    @classmethod
    def validate_rounding_mode(cls, v: str) -> str:
        v = v.upper()
        if v not in ROUNDING_MODES:
            raise ValueError(f"ROUNDING_MODE must be one of {sorted(ROUNDING_MODES)}")
        return v

    @field_validator("DIVISION_PRECISION")
    @classmethod
    def validate_division_precision(cls, v: int) -> int:
        if v < 1:
            raise ValueError("DIVISION_PRECISION must be >= 1")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton, read once per process."""
    return Settings()

"""
DecimalAmount - Shared pytest fixtures.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest

# ─── Environment setup (before any library imports) ──────────────────────────

for _name in list(os.environ):
    if _name.upper().startswith("DECIMAL_AMOUNT_"):
        del os.environ[_name]

from decimal_amount.config import Settings, get_settings  # noqa: E402

# ─────────────────────────────────────────────────────────────────────────────
# SETTINGS FIXTURES
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop the cached Settings so env changes made by a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings_env(monkeypatch):
    """Set DECIMAL_AMOUNT_* variables and return the resulting Settings."""

    def _apply(**values: str) -> Settings:
        for key, value in values.items():
            monkeypatch.setenv(f"DECIMAL_AMOUNT_{key}", value)
        get_settings.cache_clear()
        return get_settings()

    return _apply

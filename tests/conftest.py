"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from descriptor_chain.core.settings import load_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Rebuild cached settings around each test so env overrides never leak."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()

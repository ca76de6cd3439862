"""Shared fixtures: isolate settings from the developer's environment."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from date_range_label.config import get_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop DATE_RANGE_* variables and the cached settings around each test."""
    for name in list(os.environ):
        if name.startswith("DATE_RANGE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

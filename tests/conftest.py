"""Shared fixtures: isolate every test from TEMPCONV_* settings."""

from __future__ import annotations

import locale
import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Drop TEMPCONV_* variables, hide any .env file and restore the numeric locale."""
    for key in list(os.environ):
        if key.startswith("TEMPCONV_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    saved = locale.setlocale(locale.LC_NUMERIC)
    yield
    locale.setlocale(locale.LC_NUMERIC, saved)

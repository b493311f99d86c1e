"""Shared fixtures for quotebook tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

SAMPLE_DATABASE = {
    "quotes": [
        {"data": "I am <not> a morning person.", "favourite": False},
        {"data": "{A} *sighs loudly* fine, {B} wins.", "favourite": True},
        {"data": "Plain words only.", "favourite": False},
    ],
    "people": ["Alice", "Bob"],
}


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all quotebook-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("quotebook.config.load_dotenv", lambda *_a, **_kw: None)
    for key in ("QUOTEBOOK_DATABASE", "QUOTEBOOK_PLAIN", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def database_file(tmp_path: Path) -> Path:
    """Write :data:`SAMPLE_DATABASE` to a temporary file and return its path."""
    path = tmp_path / "database.json"
    path.write_text(json.dumps(SAMPLE_DATABASE), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None, None, None]:
    """Restore the quotebook logger after each test to prevent handler leaks."""
    logger = logging.getLogger("quotebook")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield
    logger.handlers = original_handlers
    logger.setLevel(original_level)

"""
Pytest configuration for the ADR tool.

Provides fixtures for:
- An isolated working directory per test
- Environment without configuration overrides
- Settings pointing at a temporary record directory
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from adr.config import Settings

_CONFIG_ENV_VARS = (
    "ADR_DIRECTORY",
    "ADR_TEMPLATE",
    "TOC_TEMPLATE",
    "DATE_FORMAT",
    "ADR_LOG_LEVEL",
    "ADR_LOG_JSON",
    "STRICT_TEMPLATES",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Remove environment variables that pydantic-settings would pick up.
    """
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test from an empty temporary directory.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def record_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "docs" / "adr"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def test_settings(record_dir: Path) -> Settings:
    """
    Settings with the record directory inside tmp_path and built-in templates.
    """
    return Settings(adr_directory=str(record_dir))


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 9, 14, 30)

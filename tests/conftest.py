"""Shared test fixtures for env-greeter."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterator

import pytest

from greeter.config import get_settings
from helpers import SteppingSource

ENV_VARS = (
    "PORT",
    "HOST",
    "NODE_ENV",
    "MY_INPUT_ENV_VAR",
    "GREETER_EXAMPLE",
    "GREETER_GREETING",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate each test from the caller's environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_moment() -> datetime:
    return datetime(2026, 10, 19, 8, 15, 30, 123456, tzinfo=timezone.utc)


@pytest.fixture
def backwards_source(fixed_moment: datetime) -> SteppingSource:
    """Wall clock that steps back one second after the first reading."""
    return SteppingSource(fixed_moment, fixed_moment - timedelta(seconds=1))

"""Shared fixtures for the Taskly test suite."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("APP_TIMEZONE", "UTC")
os.environ.setdefault("DATA_FILE", str(Path(tempfile.gettempdir()) / "taskly_test_db.json"))

from app.config import reset_settings_cache  # noqa: E402
from app.infrastructure.datastore import DataStore, reset_datastore  # noqa: E402
from app.infrastructure.security import pwd_context  # noqa: E402
from app.utils import get_app_timezone  # noqa: E402


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use few PBKDF2 rounds so registration-heavy tests stay fast."""

    monkeypatch.setattr(
        "app.infrastructure.security.pwd_context",
        pwd_context.copy(pbkdf2_sha256__rounds=1_000),
    )


@pytest.fixture()
def data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at a fresh data file for the duration of a test."""

    path = tmp_path / "db.json"
    monkeypatch.setenv("DATA_FILE", str(path))
    reset_settings_cache()
    reset_datastore()
    get_app_timezone.cache_clear()
    yield path
    reset_settings_cache()
    reset_datastore()
    get_app_timezone.cache_clear()


@pytest.fixture()
def store(data_file: Path) -> DataStore:
    return DataStore.open(str(data_file))


@pytest.fixture()
def client(data_file: Path):
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"

"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from shoresquad.cache.ttl_cache import TtlCache
from shoresquad.storage.database import connect, run_migrations
from shoresquad.storage.kv_store import SqliteKeyValueStore

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class FakeStore:
    """Dict-backed KeyValueStore."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class LockedStore:
    """KeyValueStore whose every operation fails like a locked SQLite file."""

    def get(self, key: str) -> str | None:
        raise sqlite3.OperationalError("database is locked")

    def set(self, key: str, value: str) -> None:
        raise sqlite3.OperationalError("database is locked")

    def delete(self, key: str) -> None:
        raise sqlite3.OperationalError("database is locked")


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    return conn


@pytest.fixture
def store(db: sqlite3.Connection) -> SqliteKeyValueStore:
    return SqliteKeyValueStore(db)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def cache(fake_store: FakeStore) -> TtlCache:
    return TtlCache(fake_store)


@pytest.fixture
def forecast_response() -> dict:
    with open(FIXTURE_DIR / "four_day_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def locked_cache() -> TtlCache:
    return TtlCache(LockedStore())

"""SQLite connection for the widget's local key-value data."""

import importlib
import sqlite3
from pathlib import Path

MIGRATIONS_PACKAGE = "shoresquad.storage.migrations"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a WAL-mode connection, creating parent directories for file paths."""
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply migrations numbered above the database's user_version.

    Migration modules are named ``v<NNN>_<name>.py``; the number is recorded
    in ``PRAGMA user_version`` once the module's ``up`` has run.
    """
    current = schema_version(conn)
    applied = []
    for number, name in _migrations():
        if number <= current:
            continue
        importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}").up(conn)
        # PRAGMA takes no bound parameters; number comes from a file name
        conn.execute(f"PRAGMA user_version = {number:d}")
        conn.commit()
        applied.append(name)
    return applied


def _migrations() -> list[tuple[int, str]]:
    migrations_dir = Path(__file__).parent / "migrations"
    found = []
    for p in migrations_dir.glob("v[0-9]*_*.py"):
        number = int(p.stem[1:].split("_", 1)[0])
        found.append((number, p.stem))
    return sorted(found)

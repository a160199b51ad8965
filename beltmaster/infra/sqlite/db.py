"""SQLite connection helper for the graduation database."""

from __future__ import annotations

import sqlite3

from .migrator import apply_migrations


def get_connection(db_path: str, migrate: bool = True) -> sqlite3.Connection:
    # Explicit BEGIN/commit is issued by the application facade.
    conn = sqlite3.connect(db_path, isolation_level=None)
    if migrate:
        apply_migrations(conn)
    return conn

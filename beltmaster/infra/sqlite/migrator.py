"""SQLite schema for the belt ledger, students, attendance and promotion log.

Responsibilities:
  - Create tables deterministically and idempotently.
Must not:
  - Embed business logic; schema only.
"""

from __future__ import annotations

import sqlite3

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS belt_ranks (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    rank INTEGER NOT NULL,
    track TEXT NOT NULL,
    min_time_in_months INTEGER NOT NULL DEFAULT 0,
    min_age INTEGER,
    max_age INTEGER,
    color TEXT
);

CREATE TABLE IF NOT EXISTS students (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL DEFAULT '',
    belt_id TEXT NOT NULL,
    stripes INTEGER NOT NULL DEFAULT 0,
    birth_date TEXT,
    first_graduation_date TEXT,
    last_promotion_date TEXT,
    academy_id TEXT,
    status TEXT
);

CREATE TABLE IF NOT EXISTS attendance_records (
    student_id TEXT NOT NULL,
    schedule_id TEXT NOT NULL,
    date TEXT NOT NULL,
    status TEXT NOT NULL,
    PRIMARY KEY (student_id, schedule_id, date)
);

CREATE TABLE IF NOT EXISTS promotion_log (
    run_id TEXT NOT NULL,
    student_id TEXT NOT NULL,
    date TEXT NOT NULL,
    kind TEXT NOT NULL,
    from_belt_id TEXT,
    to_belt_id TEXT,
    stripes INTEGER,
    reason_code TEXT,
    reason TEXT,
    PRIMARY KEY (run_id, student_id)
);
"""


def apply_migrations(conn: sqlite3.Connection) -> None:
    conn.executescript(SCHEMA_SQL)

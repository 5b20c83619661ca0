"""Persistence of the key-press counter in SQLite."""

from __future__ import annotations

import re
import sqlite3
from pathlib import Path

from bongocat import config

MAX_COUNT = 2**128 - 1

_COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def connect(path: str | Path | None = None) -> sqlite3.Connection:
    """Open the counter database, by default at the configured location."""
    target = config.db_path() if path is None else path
    return sqlite3.connect(str(target))


def initialize_schema(conn: sqlite3.Connection) -> None:
    """Create the counter table if it does not exist yet."""
    conn.execute(
        """CREATE TABLE IF NOT EXISTS counter (
            id    INTEGER PRIMARY KEY,
            count TEXT NOT NULL
        )"""
    )
    conn.commit()


def _parse_count(text: str) -> int:
    if not _COUNT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid counter value: {text!r}")
    value = int(text)
    if value > MAX_COUNT:
        raise ValueError(f"counter value out of range: {text!r}")
    return value


def read_counter(conn: sqlite3.Connection) -> int | None:
    """Return the stored count, or None when nothing has been stored."""
    row = conn.execute("SELECT count FROM counter WHERE id = 1").fetchone()
    if row is None:
        return None
    value = row[0]
    if not isinstance(value, str):
        raise TypeError(f"expected TEXT for counter, got {value!r}")
    return _parse_count(value)


def write_counter(conn: sqlite3.Connection, count: int) -> None:
    """Store the count, replacing any previous value."""
    if not 0 <= count <= MAX_COUNT:
        raise ValueError(f"counter value out of range: {count}")
    text = str(count)
    cursor = conn.execute("UPDATE counter SET count = ?1 WHERE id = 1", (text,))
    if cursor.rowcount == 0:
        conn.execute("INSERT INTO counter (id, count) VALUES (1, ?1)", (text,))
    conn.commit()
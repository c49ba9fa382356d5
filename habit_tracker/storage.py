"""
SQLite layer for the habit tracker.

Each persisted slot ("habits", "completions", "theme") is one row in a tiny
key/value table holding JSON text, so data survives restarts.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Any

from habit_tracker.config import DB_PATH_DEFAULT

logger = logging.getLogger(__name__)


def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


@contextmanager
def connect(db_path: str = DB_PATH_DEFAULT):
    _ensure_parent_dir(db_path)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: str = DB_PATH_DEFAULT) -> None:
    """
    Create the key/value table if it doesn't exist yet.
    """
    with connect(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL              -- JSON
            )
            """
        )


def load(key: str, default: Any = None, db_path: str = DB_PATH_DEFAULT) -> Any:
    """
    Return the decoded value stored under ``key``, or ``default`` when the
    slot is missing or holds something that isn't valid JSON.
    """
    try:
        with connect(db_path) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
    except sqlite3.Error:
        logger.warning("Could not read slot %r from %s, using default", key, db_path, exc_info=True)
        return default
    if row is None:
        return default
    try:
        return json.loads(row["value"])
    except (TypeError, ValueError):
        logger.warning("Slot %r holds malformed JSON, using default", key)
        return default


def save(key: str, value: Any, db_path: str = DB_PATH_DEFAULT) -> None:
    """
    Rewrite the slot with the JSON form of ``value``. Failures are logged, not raised.
    """
    try:
        payload = json.dumps(value)
        with connect(db_path) as conn:
            conn.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value
                """,
                (key, payload),
            )
    except (sqlite3.Error, TypeError, ValueError):
        logger.exception("Could not save slot %r to %s", key, db_path)


class SqliteStorage:
    """
    Storage handle bound to one database file.
    """

    def __init__(self, db_path: str = DB_PATH_DEFAULT) -> None:
        self.db_path = db_path
        init_db(db_path)

    def load(self, key: str, default: Any = None) -> Any:
        return load(key, default, db_path=self.db_path)

    def save(self, key: str, value: Any) -> None:
        save(key, value, db_path=self.db_path)

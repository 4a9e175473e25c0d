# -*- coding: utf-8 -*-
"""
Durable storage of the last successful search.

Two string slots in a small SQLite key-value table:
- ``weatherData``: the conditions payload of the last successful lookup (JSON)
- ``lastSearch``:  the place name that produced it

Both are overwritten on every successful search and never deleted.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from models import CurrentConditions, CurrentPayload

logger = logging.getLogger("last_query")

SNAPSHOT_KEY = "weatherData"
LAST_PLACE_KEY = "lastSearch"

CREATE_TABLES_SQL = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class LastQueryStore:
    def __init__(self, db_path):
        self.db_path = Path(db_path)
        self.init_db()

    def _connect(self):
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self):
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._connect()
        try:
            conn.executescript(CREATE_TABLES_SQL)
            conn.commit()
            logger.info("Last-query store ready: %s", self.db_path)
        finally:
            conn.close()

    def _get(self, key: str) -> Optional[str]:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def save(self, place: str, conditions: CurrentConditions):
        """Overwrites the snapshot and the last place in one transaction."""
        conn = self._connect()
        try:
            with conn:
                conn.executemany(
                    "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                    [
                        (SNAPSHOT_KEY, json.dumps(conditions.to_payload(), ensure_ascii=False)),
                        (LAST_PLACE_KEY, place),
                    ],
                )
            logger.info("Saved last query %r", place)
        finally:
            conn.close()

    def load_last_place(self) -> Optional[str]:
        place = self._get(LAST_PLACE_KEY)
        if place is None or not place.strip():
            return None
        return place

    def load_snapshot(self) -> Optional[CurrentConditions]:
        raw = self._get(SNAPSHOT_KEY)
        if raw is None:
            return None
        try:
            payload = CurrentPayload.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Ignoring unreadable snapshot: %s", e)
            return None
        return CurrentConditions.from_payload(payload)

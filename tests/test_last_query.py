# -*- coding: utf-8 -*-
"""
Tests for last_query.py
"""
import json
import sqlite3

from conftest import make_conditions
from last_query import SNAPSHOT_KEY, LastQueryStore


def test_empty_store(store):
    assert store.load_last_place() is None
    assert store.load_snapshot() is None


def test_save_then_load(store):
    conditions = make_conditions()
    store.save("Cairo", conditions)

    assert store.load_last_place() == "Cairo"
    assert store.load_snapshot() == conditions


def test_save_overwrites_previous(store):
    store.save("Cairo", make_conditions("Cairo"))
    store.save("Oslo", make_conditions("Oslo", temperature=-3.5))

    assert store.load_last_place() == "Oslo"
    snapshot = store.load_snapshot()
    assert snapshot.name == "Oslo"
    assert snapshot.temperature == -3.5


def test_survives_reopen(tmp_path):
    db = tmp_path / "nested" / "last_query.db"
    LastQueryStore(db).save("Cairo", make_conditions())

    reopened = LastQueryStore(db)
    assert reopened.load_last_place() == "Cairo"
    assert reopened.load_snapshot() == make_conditions()


def test_snapshot_stored_in_provider_shape(store):
    store.save("Cairo", make_conditions())
    conn = sqlite3.connect(store.db_path)
    try:
        raw = conn.execute("SELECT value FROM kv_store WHERE key = ?", (SNAPSHOT_KEY,)).fetchone()[0]
    finally:
        conn.close()

    payload = json.loads(raw)
    assert payload["main"]["temp"] == 28.4
    assert payload["weather"][0]["main"] == "Clear"


def test_corrupt_snapshot_is_ignored(store):
    conn = sqlite3.connect(store.db_path)
    with conn:
        conn.execute("INSERT INTO kv_store (key, value) VALUES (?, ?)", (SNAPSHOT_KEY, "{not json"))
    conn.close()

    assert store.load_snapshot() is None

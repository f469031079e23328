import os
import sys
import sqlite3
import pytest
from pathlib import Path
from unittest.mock import MagicMock

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "tasks_test.db"
    # Point taskhub to this temp DB
    monkeypatch.setenv("TASKHUB_DB_PATH", str(path))
    # Initialize schema
    schema = Path(_PROJECT_ROOT / "taskhub" / "schema.sql").read_text(encoding="utf-8")
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(schema)
        conn.commit()
    finally:
        conn.close()
    return str(path)


def make_cursor(generated_id):
    cur = MagicMock()
    cur.lastrowid = generated_id
    return cur


@pytest.fixture()
def cursor_factory():
    return make_cursor


@pytest.fixture()
def mock_conn():
    """替身连接：execute 返回带 lastrowid 的游标"""
    conn = MagicMock()
    conn.execute.return_value = make_cursor(1)
    return conn


@pytest.fixture()
def connector(mock_conn):
    return MagicMock(return_value=mock_conn)

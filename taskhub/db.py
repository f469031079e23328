from __future__ import annotations

# taskhub/db.py
import os
import sqlite3
from contextlib import contextmanager
from typing import Iterator

import yaml

# DB 路径解析顺序：
# 1) 显式传入的 db_path
# 2) 环境变量 TASKHUB_DB_PATH
# 3) config.yaml 的 test_db_path（当检测到测试环境时）
# 4) config.yaml 的 db_path（生产默认）
# 5) 兜底：项目根 tasks.db
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "tasks.db")
_SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schema.sql")

MEMORY = ":memory:"


def _read_config_yaml(cfg_path: str | None = None) -> dict:
    cfg_path = cfg_path or os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def get_db_path(explicit: str | None = None, cfg_path: str | None = None) -> str:
    env_path = os.environ.get("TASKHUB_DB_PATH")
    cfg = _read_config_yaml(cfg_path)
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if explicit:
        path = explicit
    elif env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    if path == MEMORY:
        return path

    # 确保目录存在
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """
    打开 SQLite 连接（autocommit）。启用 foreign_keys，row_factory 为 Row。
    调用方负责关闭。
    """
    conn = sqlite3.connect(
        get_db_path(db_path),
        detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
        isolation_level=None,
    )
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
    except sqlite3.Error:
        conn.close()
        raise
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()


def ensure_schema(conn: sqlite3.Connection) -> None:
    with open(_SCHEMA_PATH, "r", encoding="utf-8") as f:
        conn.executescript(f.read())
    conn.commit()

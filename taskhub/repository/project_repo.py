from __future__ import annotations

from sqlite3 import Connection

from . import generated_key

INSERT_PROJECT = "INSERT INTO Projects (title, description, userId) VALUES (?, ?, ?)"


def insert_project(conn: Connection, title: str, description: str, user_id: int) -> int:
    # userId 的引用完整性交给数据库的外键约束
    cur = conn.execute(INSERT_PROJECT, (title, description, user_id))
    return generated_key(cur, "Projects")

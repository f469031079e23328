from __future__ import annotations

from sqlite3 import Connection

from . import generated_key

INSERT_USER = "INSERT INTO Users (name) VALUES (?)"


def insert_user(conn: Connection, name: str) -> int:
    cur = conn.execute(INSERT_USER, (name,))
    return generated_key(cur, "Users")

"""Repository layer: DB access helpers (SQLite).

Keep functions thin and focused: one parameterized insert each, returning the
engine-generated key so callers can link child rows to new parents.
"""
from __future__ import annotations

from ..errors import GeneratedKeyMissingError


def generated_key(cur, table: str) -> int:
    """Return the auto-increment id the engine reported for the last insert on `cur`."""
    key = cur.lastrowid
    if key is None:
        raise GeneratedKeyMissingError(f"no generated key returned for insert into {table}")
    return int(key)

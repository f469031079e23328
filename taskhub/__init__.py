"""Persistence layer for users, projects and tasks (SQLite)."""
from __future__ import annotations

from .errors import DataAccessError, GeneratedKeyMissingError
from .gateway import PersistenceGateway

__all__ = ["DataAccessError", "GeneratedKeyMissingError", "PersistenceGateway"]

from __future__ import annotations


class DataAccessError(Exception):
    """Any failure to reach the store or to persist a row."""


class GeneratedKeyMissingError(DataAccessError):
    """The engine reported no generated key for an insert."""

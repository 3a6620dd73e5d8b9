"""
SQLite infrastructure package.

Provides SQLite storage for diff case persistence.
"""

from bytediff.infrastructure.sqlite.store import SCHEMA_VERSION, SqliteCaseStore

__all__ = [
    "SCHEMA_VERSION",
    "SqliteCaseStore",
]

"""
SQLite-based case store for diff case persistence.

Provides CRUD operations for:
- Diff cases (both payloads and the latest report)
- Report-only lookups by case name

Uses stdlib sqlite3 with no ORM.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path

from bytediff.application.case_store import CaseStore
from bytediff.domain.models import DiffCase, DiffReport
from bytediff.infrastructure.sqlite.mapping import (
    case_to_row,
    columns_to_report,
    row_to_case,
)

logger = logging.getLogger(__name__)

# Schema version - increment when making breaking changes
SCHEMA_VERSION = 1


class SqliteCaseStore(CaseStore):
    """
    SQLite-backed storage for diff cases.

    Usage:
        store = SqliteCaseStore(Path("output/diff_cases.db"))
        store.initialize_schema()

        saved = store.save(DiffCase.new("case-1"))
        case = store.get("case-1")
        report = store.get_report("case-1")
    """

    def __init__(self, db_path: Path | str) -> None:
        """
        Initialize case store.

        Args:
            db_path: Path to SQLite database file (created if not exists)
        """
        self.db_path = Path(db_path)
        self._connection: sqlite3.Connection | None = None
        # One shared connection serves the threaded HTTP server
        self._lock = threading.RLock()
        logger.info("SqliteCaseStore initialized: %s", self.db_path)

    def _get_connection(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._connection is None:
            # Ensure parent directory exists
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self._connection = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
            )
            # Use Row factory for dict-like access
            self._connection.row_factory = sqlite3.Row
            logger.debug("Database connection established")
        return self._connection

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._connection:
                self._connection.close()
                self._connection = None
                logger.debug("Database connection closed")

    # ========================================================================
    # Schema Management
    # ========================================================================

    def initialize_schema(self) -> None:
        """
        Create database tables if they don't exist.

        Safe to call multiple times - uses CREATE TABLE IF NOT EXISTS.
        """
        with self._lock:
            conn = self._get_connection()

            # One row per case name
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS diff_cases (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL UNIQUE,
                    left_data BLOB NOT NULL,
                    right_data BLOB NOT NULL,
                    report_status TEXT,
                    report_insights TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """
            )

            # Schema metadata (for future migrations)
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS schema_meta (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """
            )

            conn.execute(
                """
                INSERT OR REPLACE INTO schema_meta (key, value)
                VALUES ('version', ?)
            """,
                (str(SCHEMA_VERSION),),
            )

            conn.commit()
        logger.info("Database schema initialized (version %d)", SCHEMA_VERSION)

    # ========================================================================
    # Case Operations
    # ========================================================================

    def get(self, name: str) -> DiffCase | None:
        """
        Load a case by name.

        Args:
            name: Case name

        Returns:
            The stored case, or None if not found
        """
        with self._lock:
            row = self._get_connection().execute(
                """
                SELECT id, name, left_data, right_data, report_status, report_insights
                FROM diff_cases WHERE name = ?
            """,
                (name,),
            ).fetchone()
        return row_to_case(row) if row else None

    def get_report(self, name: str) -> DiffReport | None:
        """
        Load only the report of a case, without reading the payloads.

        Returns:
            The stored report, or None if not found
        """
        with self._lock:
            row = self._get_connection().execute(
                "SELECT report_status, report_insights FROM diff_cases WHERE name = ?",
                (name,),
            ).fetchone()
        if row is None:
            return None
        return columns_to_report(row["report_status"], row["report_insights"])

    def save(self, case: DiffCase) -> DiffCase:
        """
        Insert or update a case.

        A case without an id is inserted. If another writer inserted the same
        name first, the row is overwritten (last write wins) rather than
        failing on the unique name.

        Returns:
            The saved case with its id assigned
        """
        params = case_to_row(case)
        params["now"] = datetime.now(timezone.utc).isoformat()

        with self._lock:
            conn = self._get_connection()
            try:
                if case.id is None:
                    conn.execute(
                        """
                        INSERT INTO diff_cases (
                            name, left_data, right_data, report_status,
                            report_insights, created_at, updated_at
                        )
                        VALUES (
                            :name, :left_data, :right_data, :report_status,
                            :report_insights, :now, :now
                        )
                        ON CONFLICT(name) DO UPDATE SET
                            left_data = excluded.left_data,
                            right_data = excluded.right_data,
                            report_status = excluded.report_status,
                            report_insights = excluded.report_insights,
                            updated_at = excluded.updated_at
                    """,
                        params,
                    )
                    case_id = conn.execute(
                        "SELECT id FROM diff_cases WHERE name = ?", (case.name,)
                    ).fetchone()["id"]
                else:
                    conn.execute(
                        """
                        UPDATE diff_cases SET
                            name = :name,
                            left_data = :left_data,
                            right_data = :right_data,
                            report_status = :report_status,
                            report_insights = :report_insights,
                            updated_at = :now
                        WHERE id = :id
                    """,
                        params,
                    )
                    case_id = case.id
                conn.commit()
            except sqlite3.Error:
                conn.rollback()
                raise

        logger.debug("Saved diff case '%s' (id=%s)", case.name, case_id)
        return case.with_id(case_id)

    def list_names(self) -> list[str]:
        """Names of all stored cases, alphabetically."""
        with self._lock:
            rows = self._get_connection().execute(
                "SELECT name FROM diff_cases ORDER BY name"
            ).fetchall()
        return [row["name"] for row in rows]

"""
In-memory case store.

Process-local storage for tests and throwaway runs. The lock only guards
individual dictionary operations; a load followed by a save is still an
unguarded read-modify-write, exactly like the SQLite store.
"""

from __future__ import annotations

import itertools
import logging
import threading

from bytediff.application.case_store import CaseStore
from bytediff.domain.models import DiffCase, DiffReport

logger = logging.getLogger(__name__)


class InMemoryCaseStore(CaseStore):
    """Dictionary-backed case store keyed by case name."""

    def __init__(self) -> None:
        self._cases: dict[str, DiffCase] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, name: str) -> DiffCase | None:
        with self._lock:
            return self._cases.get(name)

    def get_report(self, name: str) -> DiffReport | None:
        case = self.get(name)
        return case.report if case else None

    def save(self, case: DiffCase) -> DiffCase:
        with self._lock:
            if case.id is None:
                existing = self._cases.get(case.name)
                case = case.with_id(existing.id if existing else next(self._ids))
            self._cases[case.name] = case
        logger.debug("Saved diff case '%s' in memory (id=%s)", case.name, case.id)
        return case

    def list_names(self) -> list[str]:
        with self._lock:
            return sorted(self._cases)

"""
Case Coordinator - Orchestrates submissions to diff cases.

Each submission is one unit of work:
    load (or create) -> replace one side -> recompute report -> save

Submissions for different case names are independent. Submissions for the
same name are an unguarded read-modify-write, so when two of them overlap
the later save wins and the other update is lost. There is no locking,
merging or retry here; storage errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging

from bytediff.application.case_store import CaseStore
from bytediff.application.comparison_engine import ComparisonEngine
from bytediff.domain.exceptions import MissingPayloadError
from bytediff.domain.models import (
    BinaryPayload,
    DiffCase,
    DiffReport,
    DiffSide,
)

logger = logging.getLogger(__name__)


def _resolve_side(side: DiffSide | str) -> DiffSide:
    if isinstance(side, DiffSide):
        return side
    resolved = DiffSide.from_string(side)
    if resolved is None:
        raise ValueError(f"invalid side: {side!r}")
    return resolved


class CaseCoordinator:
    """
    Application service for the diff case lifecycle.

    Usage:
        coordinator = CaseCoordinator(store)
        coordinator.submit_side("case-1", DiffSide.LEFT, BinaryPayload.of(b"abc"))
        coordinator.submit_side("case-1", DiffSide.RIGHT, BinaryPayload.of(b"abd"))
        report = coordinator.get_report("case-1")
    """

    def __init__(self, store: CaseStore, engine: ComparisonEngine | None = None) -> None:
        self.store = store
        self.engine = engine or ComparisonEngine()

    def submit_side(
        self,
        name: str,
        side: DiffSide | str,
        payload: BinaryPayload | None,
    ) -> DiffCase:
        """
        Create or update a case with data for one side.

        The report is always recomputed from the updated pair, never taken
        from the previously stored report.

        Args:
            name: Case name
            side: Side the payload belongs to
            payload: New data for that side

        Returns:
            The saved case

        Raises:
            MissingPayloadError: If payload is None
            ValueError: If side is not a valid side name
        """
        if payload is None:
            raise MissingPayloadError("missing data")
        target = _resolve_side(side)

        existing = self.store.get(name)
        if existing is None:
            logger.debug("Creating new diff case '%s'", name)
            existing = DiffCase.new(name)

        updated = existing.with_side(target, payload)
        report = self.engine.compare(updated.left, updated.right)
        saved = self.store.save(updated.with_report(report))

        logger.info(
            "Case '%s': %s side set (%d bytes) -> %s",
            name, target.value, payload.length, report.status.value,
        )
        return saved

    def submit_encoded_side(
        self,
        name: str,
        side: DiffSide | str,
        encoded: str | None,
    ) -> DiffCase:
        """
        Decode base64 data and submit it as one side of a case.

        Decoding happens before anything is loaded or compared, so bad input
        never reaches the store.

        Raises:
            MissingPayloadError: If no data was given
            InvalidPayloadError: If the data is not valid base64
        """
        target = _resolve_side(side)
        payload = BinaryPayload.from_base64(encoded)
        return self.submit_side(name, target, payload)

    def get_report(self, name: str) -> DiffReport | None:
        """
        Look up the stored report of a case.

        Returns:
            The latest report, or None if no case exists under that name
        """
        report = self.store.get_report(name)
        if report is None:
            logger.debug("No diff case found for '%s'", name)
        return report

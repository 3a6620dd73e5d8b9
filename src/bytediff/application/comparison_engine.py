"""
Comparison Engine - Pure function for diffing two binary payloads.

Compares payloads at fixed offsets only: there is no alignment, so an
inserted or deleted byte shows up as a length mismatch, never as a shift.

Architecture Note:
    - Pure functions with no side effects
    - No database or file I/O
    - Safe to call from any number of threads
"""

from __future__ import annotations

import logging

from bytediff.domain.models import (
    BinaryPayload,
    DiffInsight,
    DiffReport,
    ReportStatus,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Run Tracking
# =============================================================================

class _RunTracker:
    """
    Collects differing runs while scanning positions in order.

    At most one run is open at a time. A matching byte closes it.
    """

    def __init__(self) -> None:
        self.insights: list[DiffInsight] = []
        self._open_offset: int | None = None
        self._open_length = 0

    def mismatch(self, index: int) -> None:
        if self._open_offset is None:
            self._open_offset = index
            self._open_length = 1
        else:
            self._open_length += 1

    def match(self) -> None:
        if self._open_offset is not None:
            self.insights.append(DiffInsight(self._open_offset, self._open_length))
            self._open_offset = None
            self._open_length = 0

    def results(self) -> list[DiffInsight]:
        # Close a run that reaches the end of the buffers
        self.match()
        return self.insights


# =============================================================================
# Public API
# =============================================================================

def compare(left: BinaryPayload, right: BinaryPayload) -> DiffReport:
    """
    Diff two payloads.

    Bytes are only inspected when both sides have the same length,
    otherwise the result is LENGTH_MISMATCH. Equal-length payloads yield
    EQUAL, or NOT_EQUAL with one insight per maximal differing run.

    Args:
        left: Left side payload
        right: Right side payload

    Returns:
        DiffReport describing the outcome
    """
    if len(left) != len(right):
        logger.debug("Length mismatch: left=%d right=%d", len(left), len(right))
        return DiffReport.of(ReportStatus.LENGTH_MISMATCH)

    tracker = _RunTracker()
    for index, (left_byte, right_byte) in enumerate(zip(left.data, right.data)):
        if left_byte == right_byte:
            tracker.match()
        else:
            tracker.mismatch(index)

    insights = tracker.results()
    status = ReportStatus.NOT_EQUAL if insights else ReportStatus.EQUAL
    logger.debug(
        "Compared %d bytes: %s (%d differing runs)",
        len(left), status.value, len(insights),
    )
    return DiffReport.of(status, insights)


class ComparisonEngine:
    """Stateless wrapper around compare() so callers can inject an engine."""

    def compare(self, left: BinaryPayload, right: BinaryPayload) -> DiffReport:
        return compare(left, right)

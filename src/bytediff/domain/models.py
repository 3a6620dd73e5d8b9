"""
Domain models for bytediff.

This module contains the core business entities that represent:
- Binary payloads submitted for one side of a diff
- Diff reports and the insights they carry
- Diff cases, the named aggregate linking both sides

These models are pure data structures with no I/O dependencies.
They can be serialized to/from SQLite via the infrastructure layer.
All of them are immutable: updates produce new instances.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from bytediff.domain.exceptions import InvalidPayloadError, MissingPayloadError


# ============================================================================
# Enumerations
# ============================================================================

class DiffSide(Enum):
    """One of the two independently submittable slots of a diff case."""
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_string(cls, value: object) -> DiffSide | None:
        """
        Parse a side name, case-insensitively.

        Returns:
            The matching side, or None for anything else
        """
        if not isinstance(value, str) or not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ReportStatus(Enum):
    """Outcome of comparing the two sides of a case."""
    EQUAL = "equal"
    LENGTH_MISMATCH = "length_mismatch"
    NOT_EQUAL = "not_equal"


class CaseState(Enum):
    """How many sides of a case currently hold data."""
    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


# ============================================================================
# Value Objects
# ============================================================================

@dataclass(frozen=True)
class BinaryPayload:
    """
    Immutable byte buffer for one side of a diff.

    Attributes:
        data: The raw bytes
    """
    data: bytes = b""

    def __post_init__(self) -> None:
        if self.data is None:
            raise ValueError("cannot create binary payload from no bytes")
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def empty(cls) -> BinaryPayload:
        return cls(b"")

    @classmethod
    def of(cls, data: bytes | bytearray | memoryview) -> BinaryPayload:
        return cls(data)

    @classmethod
    def from_base64(cls, text: str | None) -> BinaryPayload:
        """
        Decode a standard base64 string into a payload.

        Args:
            text: Base64 encoded data

        Returns:
            A new payload holding the decoded bytes

        Raises:
            MissingPayloadError: If no text was given
            InvalidPayloadError: If the text is not valid base64
        """
        if text is None:
            raise MissingPayloadError("missing data")
        if not isinstance(text, str):
            raise InvalidPayloadError("invalid base64 data")
        try:
            return cls(base64.b64decode(text, validate=True))
        except (binascii.Error, ValueError) as e:
            raise InvalidPayloadError("invalid base64 data") from e

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def byte_at(self, position: int) -> int:
        """Get the byte at a position, rejecting anything out of bounds."""
        if position < 0 or position >= len(self.data):
            raise IndexError("invalid position")
        return self.data[position]

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


@dataclass(frozen=True)
class DiffInsight:
    """
    One maximal contiguous run of differing byte positions.

    Attributes:
        offset: Index of the first differing byte
        length: Number of consecutive differing bytes
    """
    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset cannot be negative")
        if self.length < 1:
            raise ValueError("length must be at least 1")

    @property
    def end(self) -> int:
        """Index just past the last differing byte."""
        return self.offset + self.length

    def to_dict(self) -> dict[str, int]:
        return {"offset": self.offset, "length": self.length}


@dataclass(frozen=True)
class DiffReport:
    """
    Result of comparing both sides of a diff case.

    EQUAL and LENGTH_MISMATCH reports never carry insights; NOT_EQUAL
    reports carry at least one. Insights are ascending by offset and
    separated by at least one matching byte.

    Attributes:
        status: Comparison outcome
        insights: Differing runs, only for NOT_EQUAL
    """
    status: ReportStatus
    insights: tuple[DiffInsight, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.status is None:
            raise ValueError("diff report status required")
        insights = tuple(self.insights or ())
        object.__setattr__(self, "insights", insights)

        if self.status is ReportStatus.NOT_EQUAL:
            if not insights:
                raise ValueError("NOT_EQUAL report requires at least one insight")
        elif insights:
            raise ValueError(f"{self.status.name} report cannot carry insights")

        for previous, current in zip(insights, insights[1:]):
            # A gap of zero matching bytes would have been one run
            if current.offset <= previous.end:
                raise ValueError(
                    f"insights must be ascending and non-adjacent: "
                    f"{previous} followed by {current}"
                )

    @classmethod
    def of(
        cls,
        status: ReportStatus,
        insights: Iterable[DiffInsight] | None = None,
    ) -> DiffReport:
        return cls(status, tuple(insights or ()))

    @property
    def differing_bytes(self) -> int:
        """Total number of differing positions across all insights."""
        return sum(insight.length for insight in self.insights)

    def to_dict(self) -> dict[str, Any]:
        """External representation; `insights` is omitted when empty."""
        result: dict[str, Any] = {"status": self.status.value}
        if self.insights:
            result["insights"] = [insight.to_dict() for insight in self.insights]
        return result


# ============================================================================
# Aggregate
# ============================================================================

@dataclass(frozen=True)
class DiffCase:
    """
    Named diff case holding both sides and the latest report.

    Attributes:
        name: Caller-supplied case name (stable identity)
        id: Storage-assigned identifier (None until first saved)
        left: Left side payload (empty until submitted)
        right: Right side payload (empty until submitted)
        report: Latest comparison result (None until first comparison)
    """
    name: str
    id: int | None = None
    left: BinaryPayload = field(default_factory=BinaryPayload.empty)
    right: BinaryPayload = field(default_factory=BinaryPayload.empty)
    report: DiffReport | None = None

    @classmethod
    def new(cls, name: str) -> DiffCase:
        """A fresh case: both sides empty, no report, no id."""
        return cls(name=name)

    def payload(self, side: DiffSide) -> BinaryPayload:
        return self.left if side is DiffSide.LEFT else self.right

    def with_side(self, side: DiffSide, payload: BinaryPayload) -> DiffCase:
        """Copy of this case with one side replaced and the other untouched."""
        if side is DiffSide.LEFT:
            return replace(self, left=payload)
        return replace(self, right=payload)

    def with_report(self, report: DiffReport | None) -> DiffCase:
        return replace(self, report=report)

    def with_id(self, case_id: int | None) -> DiffCase:
        return replace(self, id=case_id)

    @property
    def state(self) -> CaseState:
        filled = sum(1 for payload in (self.left, self.right) if payload.length)
        if filled == 2:
            return CaseState.COMPLETE
        if filled == 1:
            return CaseState.PARTIAL
        return CaseState.EMPTY

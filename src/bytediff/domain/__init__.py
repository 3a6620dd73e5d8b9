"""
Domain layer package.

Contains pure data models with no I/O dependencies.
Models can be serialized to/from SQLite via the infrastructure layer.
"""

from bytediff.domain.exceptions import (
    BytediffError,
    InvalidPayloadError,
    MissingPayloadError,
)
from bytediff.domain.models import (
    # Enums
    DiffSide,
    ReportStatus,
    CaseState,
    # Value objects
    BinaryPayload,
    DiffInsight,
    DiffReport,
    # Aggregate
    DiffCase,
)
from bytediff.domain.settings import ServiceSettings

__all__ = [
    # Exceptions
    "BytediffError",
    "InvalidPayloadError",
    "MissingPayloadError",
    # Enums
    "DiffSide",
    "ReportStatus",
    "CaseState",
    # Value objects
    "BinaryPayload",
    "DiffInsight",
    "DiffReport",
    # Aggregate
    "DiffCase",
    # Settings
    "ServiceSettings",
]

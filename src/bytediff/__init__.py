"""
bytediff - Binary diff service.

Compares two binary payloads submitted independently under a shared case
name and reports whether they are equal, differ in length, or differ at
specific offsets.

Usage:
    # CLI
    python main.py serve --port 8080
    python main.py compare left.bin right.bin

    # Programmatic
    from bytediff.application.container import Container

    coordinator = Container().coordinator
    coordinator.submit_side("case-1", "left", BinaryPayload.of(b"..."))
"""

__version__ = "0.1.0"

from bytediff.application.comparison_engine import compare
from bytediff.domain.models import BinaryPayload, DiffCase, DiffReport, DiffSide, ReportStatus

__all__ = [
    "BinaryPayload",
    "DiffCase",
    "DiffReport",
    "DiffSide",
    "ReportStatus",
    "compare",
    "__version__",
]

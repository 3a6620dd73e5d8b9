"""
Application layer package.

Use cases and service orchestration: the comparison engine, the case
coordinator and the storage contract they depend on. The dependency
container lives in bytediff.application.container.
"""

from bytediff.application.case_coordinator import CaseCoordinator
from bytediff.application.case_store import CaseStore
from bytediff.application.comparison_engine import ComparisonEngine, compare

__all__ = [
    "CaseCoordinator",
    "CaseStore",
    "ComparisonEngine",
    "compare",
]

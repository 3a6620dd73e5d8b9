"""
Shared test configuration.

Puts src/ on the import path and provides common fixtures.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parents[1] / "src"))

import pytest

from bytediff.application.case_coordinator import CaseCoordinator
from bytediff.infrastructure.memory_store import InMemoryCaseStore


@pytest.fixture
def memory_store():
    """Fresh in-memory case store."""
    return InMemoryCaseStore()


@pytest.fixture
def coordinator(memory_store):
    """Coordinator backed by an in-memory store."""
    return CaseCoordinator(memory_store)

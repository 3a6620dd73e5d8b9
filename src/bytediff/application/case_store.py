"""
Case Store - Storage contract for diff cases.

The coordinator only depends on this abstraction. Implementations live
in the infrastructure layer:
- SqliteCaseStore: persistent, file-backed
- InMemoryCaseStore: process-local, used for tests and ephemeral runs
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bytediff.domain.models import DiffCase, DiffReport


class CaseStore(ABC):
    """
    Keyed load/save of diff cases by name.

    Errors raised by an implementation are passed through to callers as-is.
    """

    @abstractmethod
    def get(self, name: str) -> DiffCase | None:
        """Load a case by name, or None if no case exists."""

    @abstractmethod
    def get_report(self, name: str) -> DiffReport | None:
        """Load only the report of a case, or None if no case exists."""

    @abstractmethod
    def save(self, case: DiffCase) -> DiffCase:
        """
        Persist a case.

        Inserts when the case has no id, updates in place otherwise.

        Returns:
            The stored case, with its id assigned
        """

    @abstractmethod
    def list_names(self) -> list[str]:
        """Names of all stored cases."""

    def close(self) -> None:
        """Release any held resources."""

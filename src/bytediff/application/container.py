"""
Dependency injection container for the application.

This module provides a centralized way to create and manage application dependencies.
It follows the dependency injection pattern for clean architecture.
"""

import logging
from pathlib import Path
from typing import Optional

from ..domain.settings import ServiceSettings
from ..infrastructure.memory_store import InMemoryCaseStore
from ..infrastructure.sqlite.store import SqliteCaseStore
from .case_coordinator import CaseCoordinator
from .case_store import CaseStore
from .comparison_engine import ComparisonEngine

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.

    Manages the creation and lifecycle of application services and infrastructure components.
    """

    def __init__(self, settings: Optional[ServiceSettings] = None):
        """
        Initialize the container.

        Args:
            settings: Service settings (defaults used when omitted)
        """
        self.settings = settings or ServiceSettings()

        self._case_store: Optional[CaseStore] = None
        self._engine: Optional[ComparisonEngine] = None
        self._coordinator: Optional[CaseCoordinator] = None

    @property
    def case_store(self) -> CaseStore:
        """Get the case store for the configured backend."""
        if self._case_store is None:
            if self.settings.storage_backend == "memory":
                logger.warning("Using in-memory case store - cases are lost on exit")
                self._case_store = InMemoryCaseStore()
            else:
                store = SqliteCaseStore(Path(self.settings.database_path))
                store.initialize_schema()
                self._case_store = store
        return self._case_store

    @property
    def engine(self) -> ComparisonEngine:
        """Get the comparison engine."""
        if self._engine is None:
            self._engine = ComparisonEngine()
        return self._engine

    @property
    def coordinator(self) -> CaseCoordinator:
        """Get the case coordinator wired to the store and engine."""
        if self._coordinator is None:
            self._coordinator = CaseCoordinator(self.case_store, self.engine)
        return self._coordinator

    def close(self) -> None:
        """Release the store and reset all cached instances."""
        if self._case_store is not None:
            self._case_store.close()
        self._case_store = None
        self._engine = None
        self._coordinator = None
        logger.debug("Container closed - all instances cleared")

"""Abstract scratchpad store interface.

The pipeline depends on ScratchpadStore, not on a concrete backend, so the
CLI can swap the filesystem store for something else without touching
reviewpad_core.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reviewpad_store.models import ScratchpadRecord


class ScratchpadStore(ABC):
    """Persistence for scratchpad documents, keyed by file name."""

    @abstractmethod
    def save(self, name: str, text: str) -> Path:
        """Write the full document and return where it lives.

        The write must be complete (visible to a subsequent load) before
        this returns.
        """

    @abstractmethod
    def load(self, name: str) -> str:
        """Return the text of an active scratchpad. Raises FileNotFoundError."""

    @abstractmethod
    def list_scratchpads(self, state: str = "all") -> list[ScratchpadRecord]:
        """Return stored scratchpads, oldest first. ``state`` is active, completed or all."""

    @abstractmethod
    def complete(self, name: str) -> Path:
        """Move an active scratchpad to the completed area. Raises FileNotFoundError."""

    def close(self) -> None:
        """Release any resources held by the store.

        Default is a no-op so callers can always call close() safely.
        """

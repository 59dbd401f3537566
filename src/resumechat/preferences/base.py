"""Abstract base class for preference stores.

This module defines the interface for client-local key/value storage.
The abstraction hides:
- Storage format (JSON file, in-memory dict)
- Where the data lives on disk
"""

from abc import ABC, abstractmethod


class PreferenceStore(ABC):
    """Abstract client-local preference storage.

    Values are plain strings, read and written one key at a time.
    """

    @abstractmethod
    def get(self, key: str, default: str | None = None) -> str | None:
        """Read a stored value, or ``default`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist a value immediately."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

"""In-memory preference store.

Data is lost when the application exits.
"""

from .base import PreferenceStore


class InMemoryPreferenceStore(PreferenceStore):
    """Dict-backed preference store for tests and non-persistent sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    @property
    def backend_type(self) -> str:
        return "memory"

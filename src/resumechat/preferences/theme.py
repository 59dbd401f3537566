"""Theme preference.

Process-wide dark/light flag: read once from the store on load(),
written back on every toggle().
"""

from enum import Enum

from .base import PreferenceStore

THEME_KEY = "theme"


class ThemeMode(str, Enum):
    DARK = "dark"
    LIGHT = "light"


class ThemeSetting:
    """Persisted dark/light theme flag."""

    def __init__(self, store: PreferenceStore) -> None:
        self._store = store
        self._mode = ThemeMode.LIGHT

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def is_dark(self) -> bool:
        return self._mode == ThemeMode.DARK

    def load(self) -> ThemeMode:
        """Read the persisted value. Absent or unknown values mean light."""
        stored = self._store.get(THEME_KEY)
        self._mode = ThemeMode.DARK if stored == ThemeMode.DARK.value else ThemeMode.LIGHT
        return self._mode

    def toggle(self) -> ThemeMode:
        """Flip the theme and persist it."""
        self._mode = ThemeMode.LIGHT if self.is_dark else ThemeMode.DARK
        self._store.set(THEME_KEY, self._mode.value)
        return self._mode

"""Client-local preferences for resumechat.

Currently stores the dark/light theme choice.
"""

from .base import PreferenceStore
from .factory import create_preference_store
from .json_file import DEFAULT_PREFERENCES_PATH, JsonFilePreferenceStore
from .in_memory import InMemoryPreferenceStore
from .theme import THEME_KEY, ThemeMode, ThemeSetting

__all__ = [
    "DEFAULT_PREFERENCES_PATH",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "PreferenceStore",
    "THEME_KEY",
    "ThemeMode",
    "ThemeSetting",
    "create_preference_store",
]

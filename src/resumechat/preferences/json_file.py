"""JSON file preference store.

Keeps all preferences in a single JSON object on disk. The file is
rewritten on every set().
"""

import json
from pathlib import Path

from .base import PreferenceStore

DEFAULT_PREFERENCES_PATH = Path.home() / ".resumechat" / "preferences.json"


class JsonFilePreferenceStore(PreferenceStore):
    """Preference store backed by a JSON file.

    A missing, unreadable or non-object file reads as empty, so a corrupt
    file never prevents startup.
    """

    def __init__(self, path: str | Path = DEFAULT_PREFERENCES_PATH):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._read().get(key, default)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    @property
    def backend_type(self) -> str:
        return "json"

"""Unit tests for preference stores and the theme setting."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from resumechat.preferences import (
    THEME_KEY,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
    ThemeMode,
    ThemeSetting,
    create_preference_store,
)


class TestPreferenceStoreInterface:
    def test_store_is_abstract(self):
        with pytest.raises(TypeError):
            PreferenceStore()  # type: ignore


class TestJsonFilePreferenceStore:
    """Tests for the JSON file backend."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFilePreferenceStore(tmp_path / "prefs.json")
        assert store.get(THEME_KEY) is None
        assert store.get(THEME_KEY, "light") == "light"

    def test_set_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        JsonFilePreferenceStore(path).set(THEME_KEY, "dark")

        assert JsonFilePreferenceStore(path).get(THEME_KEY) == "dark"
        assert json.loads(path.read_text()) == {"theme": "dark"}

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"other": "value"}))
        store = JsonFilePreferenceStore(path)

        store.set(THEME_KEY, "light")

        assert json.loads(path.read_text()) == {"other": "value", "theme": "light"}

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '"dark"'])
    def test_corrupt_file_reads_empty(self, tmp_path, content):
        path = tmp_path / "prefs.json"
        path.write_text(content)
        assert JsonFilePreferenceStore(path).get(THEME_KEY) is None

    def test_backend_type(self, tmp_path):
        assert JsonFilePreferenceStore(tmp_path / "p.json").backend_type == "json"


class TestCreatePreferenceStore:
    def test_create_json(self, tmp_path):
        store = create_preference_store("json", path=tmp_path / "p.json")
        assert isinstance(store, JsonFilePreferenceStore)

    def test_create_memory(self):
        store = create_preference_store("memory")
        assert isinstance(store, InMemoryPreferenceStore)
        assert store.backend_type == "memory"

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unsupported preference backend"):
            create_preference_store("redis")


class TestThemeSetting:
    """Tests for the persisted theme flag."""

    def test_absent_value_defaults_to_light(self):
        setting = ThemeSetting(InMemoryPreferenceStore())
        assert setting.load() == ThemeMode.LIGHT
        assert setting.is_dark is False

    def test_load_dark(self):
        setting = ThemeSetting(InMemoryPreferenceStore({THEME_KEY: "dark"}))
        assert setting.load() == ThemeMode.DARK
        assert setting.is_dark

    def test_unknown_value_defaults_to_light(self):
        setting = ThemeSetting(InMemoryPreferenceStore({THEME_KEY: "solarized"}))
        assert setting.load() == ThemeMode.LIGHT

    def test_toggle_writes_every_time(self):
        store = InMemoryPreferenceStore()
        setting = ThemeSetting(store)
        setting.load()

        setting.toggle()
        assert store.get(THEME_KEY) == "dark"
        setting.toggle()
        assert store.get(THEME_KEY) == "light"

    @given(st.sampled_from([None, "dark", "light"]))
    def test_double_toggle_restores_persisted_value(self, initial):
        """Property test: toggling twice returns to the original theme."""
        store = InMemoryPreferenceStore({} if initial is None else {THEME_KEY: initial})
        setting = ThemeSetting(store)
        original = setting.load()

        setting.toggle()
        setting.toggle()

        assert setting.mode == original
        assert store.get(THEME_KEY) == original.value

    def test_toggle_survives_restart(self, tmp_path):
        path = tmp_path / "prefs.json"
        ThemeSetting(JsonFilePreferenceStore(path)).toggle()

        restarted = ThemeSetting(JsonFilePreferenceStore(path))
        assert restarted.load() == ThemeMode.DARK

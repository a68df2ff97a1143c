"""Tests for sticky_widget.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from sticky_widget.core.constants import DEFAULT_STORAGE_DIR, STORAGE_FILE_PREFIX
from sticky_widget.preferences import (
    Preferences,
    load_preferences,
    save_storage_directory,
)


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.storage.directory == DEFAULT_STORAGE_DIR
        assert prefs.storage.file_prefix == STORAGE_FILE_PREFIX
        assert prefs.display.placeholder_title == "Untitled"
        assert prefs.display.instances == 1
        assert prefs.navigation.command == ""
        assert prefs.logging.level == "WARNING"

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert set(data) == {"storage", "display", "navigation", "logging"}

    def test_default_file_round_trips(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()


class TestLoadPreferencesValues:
    def _load(self, tmp_path: Path, text: str) -> Preferences:
        path = tmp_path / "prefs.yaml"
        path.write_text(text)
        return load_preferences(path)

    def test_storage_section(self, tmp_path: Path):
        prefs = self._load(
            tmp_path,
            'storage:\n  directory: "/data/notes"\n  file_prefix: "kv_"\n',
        )
        assert prefs.storage.directory == Path("/data/notes")
        assert prefs.storage.file_prefix == "kv_"

    def test_directory_expands_user(self, tmp_path: Path):
        prefs = self._load(tmp_path, "storage:\n  directory: ~/notes\n")
        assert prefs.storage.directory == Path.home() / "notes"

    def test_display_section(self, tmp_path: Path):
        prefs = self._load(
            tmp_path,
            "display:\n  placeholder_title: '(blank)'\n  instances: 2\n",
        )
        assert prefs.display.placeholder_title == "(blank)"
        assert prefs.display.instances == 2

    def test_non_positive_instances_fall_back(self, tmp_path: Path):
        prefs = self._load(tmp_path, "display:\n  instances: -1\n")
        assert prefs.display.instances == 1

    def test_non_numeric_instances_fall_back(self, tmp_path: Path):
        prefs = self._load(tmp_path, "display:\n  instances: many\n")
        assert prefs.display.instances == 1

    def test_limit_key_is_not_configurable(self, tmp_path: Path):
        prefs = self._load(tmp_path, "display:\n  limit: 10\n  instances: 2\n")
        assert not hasattr(prefs.display, "limit")
        assert prefs.display.instances == 2

    def test_navigation_and_logging(self, tmp_path: Path):
        prefs = self._load(
            tmp_path,
            'navigation:\n  command: "notes --open {note_id}"\n'
            "logging:\n  level: debug\n  file: /tmp/w.log\n",
        )
        assert prefs.navigation.command == "notes --open {note_id}"
        assert prefs.logging.level == "DEBUG"
        assert prefs.logging.file == "/tmp/w.log"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        prefs = self._load(tmp_path, "display:\n  instances: 3\n")
        assert prefs.display.placeholder_title == "Untitled"
        assert prefs.storage.directory == DEFAULT_STORAGE_DIR

    def test_invalid_yaml_gives_defaults(self, tmp_path: Path):
        prefs = self._load(tmp_path, "display: [unclosed\n")
        assert prefs == Preferences()

    def test_non_mapping_root_gives_defaults(self, tmp_path: Path):
        prefs = self._load(tmp_path, "- just\n- a list\n")
        assert prefs == Preferences()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        assert self._load(tmp_path, "") == Preferences()


class TestSaveStorageDirectory:
    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_storage_directory(Path("/srv/notes"), path)
        assert load_preferences(path).storage.directory == Path("/srv/notes")

    def test_preserves_comments(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_storage_directory(Path("/srv/notes"), path)
        assert "# where the notes app keeps its records" in path.read_text()

    def test_creates_file_when_missing(self, tmp_path: Path):
        path = tmp_path / "sub" / "prefs.yaml"
        save_storage_directory(Path("/srv/notes"), path)
        assert load_preferences(path).storage.directory == Path("/srv/notes")

    def test_adds_key_to_existing_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("storage:\n  file_prefix: kv_\n")
        save_storage_directory(Path("/srv/notes"), path)
        prefs = load_preferences(path)
        assert prefs.storage.directory == Path("/srv/notes")
        assert prefs.storage.file_prefix == "kv_"

    def test_appends_section(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  instances: 2\n")
        save_storage_directory(Path("/srv/notes"), path)
        prefs = load_preferences(path)
        assert prefs.storage.directory == Path("/srv/notes")
        assert prefs.display.instances == 2

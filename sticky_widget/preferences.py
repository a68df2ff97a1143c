"""User preferences for the sticky-notes widget.

Loads settings from ~/.sticky-notes/widget-preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .core.constants import (
    DEFAULT_STORAGE_DIR,
    STORAGE_FILE_PREFIX,
    UNTITLED,
    WIDGET_HOME,
)
from .log import logger

PREFS_PATH = WIDGET_HOME / "widget-preferences.yaml"

_DEFAULT_YAML = f"""\
# Sticky Notes widget preferences
# Delete this file to reset to defaults.

storage:
  directory: "{DEFAULT_STORAGE_DIR}"   # where the notes app keeps its records
  file_prefix: "{STORAGE_FILE_PREFIX}"

display:
  placeholder_title: "{UNTITLED}"     # shown for notes without a title
  instances: 1                   # widgets placed on the home screen

navigation:
  command: ""                    # e.g. "sticky-notes --edit {{note_id}}" (empty = notify only)

logging:
  level: "WARNING"
  file: ""                       # empty = stderr (only used outside the TUI)
"""


@dataclass
class StoragePreferences:
    """Where the notes app's records live."""

    directory: Path = DEFAULT_STORAGE_DIR
    file_prefix: str = STORAGE_FILE_PREFIX


@dataclass
class DisplayPreferences:
    placeholder_title: str = UNTITLED
    instances: int = 1


@dataclass
class NavigationPreferences:
    command: str = ""  # {note_id} is substituted


@dataclass
class LoggingPreferences:
    level: str = "WARNING"
    file: str = ""


@dataclass
class Preferences:
    """Top-level widget preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    display: DisplayPreferences = field(default_factory=DisplayPreferences)
    navigation: NavigationPreferences = field(default_factory=NavigationPreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)


def _positive_int(value: object, default: int) -> int:
    try:
        number = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if not isinstance(data, dict):
                raise ValueError("preferences root is not a mapping")
            if isinstance(data.get("storage"), dict):
                sdata = data["storage"]
                if sdata.get("directory"):
                    prefs.storage.directory = Path(str(sdata["directory"])).expanduser()
                if "file_prefix" in sdata:
                    prefs.storage.file_prefix = str(sdata["file_prefix"] or "")
            if isinstance(data.get("display"), dict):
                ddata = data["display"]
                if ddata.get("placeholder_title"):
                    prefs.display.placeholder_title = str(ddata["placeholder_title"])
                if "instances" in ddata:
                    prefs.display.instances = _positive_int(ddata["instances"], 1)
            if isinstance(data.get("navigation"), dict):
                ndata = data["navigation"]
                if "command" in ndata:
                    prefs.navigation.command = str(ndata["command"] or "")
            if isinstance(data.get("logging"), dict):
                ldata = data["logging"]
                if ldata.get("level"):
                    prefs.logging.level = str(ldata["level"]).upper()
                if "file" in ldata:
                    prefs.logging.file = str(ldata["file"] or "")
        except (OSError, yaml.YAMLError, ValueError):
            logger.debug("invalid preferences file %s, using defaults", path, exc_info=True)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs


def save_storage_directory(directory: Path, path: Path | None = None) -> None:
    """Persist the storage directory to the preferences file.

    Surgically updates only the ``directory`` value, preserving the rest of
    the file (including user comments) as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text()
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        value = f'"{directory}"'
        if re.search(r"^\s+directory:", text, re.MULTILINE):
            text = re.sub(
                r'^(\s+directory:)\s*(?:"[^"]*"|\S+)(.*?)$',
                lambda m: f"{m.group(1)} {value}{m.group(2)}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        elif re.search(r"^storage:", text, re.MULTILINE):
            # storage section exists but no directory key
            text = re.sub(
                r"^(storage:.*)$",
                lambda m: f"{m.group(1)}\n  directory: {value}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = text.rstrip() + f"\n\nstorage:\n  directory: {value}\n"

        path.write_text(text)
    except OSError:
        logger.debug("could not save storage directory", exc_info=True)

"""Module-level constants for the sticky-notes widget."""

from __future__ import annotations

from pathlib import Path

# Storage keys written by the notes app
NOTES_KEY = "@sticky_notes"
WIDGET_NOTES_KEY = "@sticky_notes_widget"

# AsyncStorage keeps one file per key, named <prefix><key>
STORAGE_FILE_PREFIX = "RCTAsyncLocalStorage_V1_"

EMPTY_ARRAY = "[]"

DISPLAY_LIMIT = 3
UNTITLED = "Untitled"

# Bridge module name and rejection code
BRIDGE_NAME = "StickyNoteWidget"
BRIDGE_ERROR_CODE = "ERROR"

WIDGET_HOME = Path.home() / ".sticky-notes"
DEFAULT_STORAGE_DIR = WIDGET_HOME / "storage"

"""Data models for the widget pipeline."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from .constants import UNTITLED


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Note:
    """A single note as stored by the notes app."""

    id: str
    title: str
    content: str = ""
    updated_at: int = field(default_factory=now_ms)  # ms since epoch

    def display_title(self, placeholder: str = UNTITLED) -> str:
        return self.title or placeholder


# Decode order, not sorted
NoteSet = list[Note]
PinnedIdSet = list[str]
# At most DISPLAY_LIMIT notes, unique ids, newest first
DisplayList = tuple[Note, ...]


@dataclass(frozen=True)
class NoteView:
    """Render data for one list position."""

    title: str
    content: str
    note_id: str  # click payload


@dataclass(frozen=True)
class LaunchRequest:
    """Where a widget click should take the host app.

    ``note_id`` is ``None`` when the click carried no note, in which case
    the app opens without a focus target.
    """

    note_id: str | None = None
    edit_mode: bool = False

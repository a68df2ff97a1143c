"""Placeholder notes shown when the notes store has nothing usable."""

from __future__ import annotations

import json

from ..models import now_ms

_DEFAULT_NOTES: tuple[tuple[str, str, str], ...] = (
    ("test1", "Welcome to Sticky Notes", "Your latest notes show up here."),
    ("test2", "Pin notes to the widget", "Pinned notes are always shown."),
    ("test3", "Third Note", "This is the third note"),
)

# Gap between consecutive placeholder timestamps (ms)
_STEP_MS = 1000


def default_notes(now: int | None = None) -> list[dict]:
    """Return the placeholder notes, newest first.

    Timestamps are *now*, *now* - 1s, *now* - 2s so the set has a strict
    recency order.
    """
    base = now_ms() if now is None else now
    return [
        {
            "id": note_id,
            "title": title,
            "content": content,
            "updatedAt": base - i * _STEP_MS,
        }
        for i, (note_id, title, content) in enumerate(_DEFAULT_NOTES)
    ]


def default_notes_payload(now: int | None = None) -> str:
    """Serialized form of :func:`default_notes`."""
    return json.dumps(default_notes(now), ensure_ascii=False)

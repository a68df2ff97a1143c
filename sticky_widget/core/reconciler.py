"""Selection reconciler: pinned ids + all notes -> bounded display list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .constants import DISPLAY_LIMIT
from .models import DisplayList, Note


def rank_by_recency(notes: Iterable[Note]) -> list[Note]:
    """Newest first; ties keep their input order (``sorted`` is stable)."""
    return sorted(notes, key=lambda n: n.updated_at, reverse=True)


def reconcile(
    all_notes: Sequence[Note],
    pinned_ids: Iterable[str] = (),
    limit: int = DISPLAY_LIMIT,
) -> DisplayList:
    """Pick at most *limit* notes to display, newest first.

    Pinned notes are taken first (pinning decides membership, recency
    decides order), then the most recent remaining notes fill the free
    slots.  Unknown pinned ids are ignored.  When more notes are pinned
    than fit, the most recent pinned ones win.
    """
    if limit <= 0 or not all_notes:
        return ()

    ranked = rank_by_recency(all_notes)
    pinned = set(pinned_ids)

    selected: list[Note] = []
    seen: set[str] = set()
    for note in ranked:
        if note.id in pinned and note.id not in seen:
            selected.append(note)
            seen.add(note.id)

    for note in ranked:
        if len(selected) >= limit:
            break
        if note.id not in seen:
            selected.append(note)
            seen.add(note.id)

    return tuple(rank_by_recency(selected)[:limit])

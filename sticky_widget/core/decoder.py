"""Note decoder: serialized-array text -> NoteSet.

Both decoders return tagged results instead of raising, so the pipeline
decides how to recover; call ``.unwrap()`` to get the raising behaviour.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import DecodeError
from .models import Note, NoteSet, PinnedIdSet, now_ms
from .result import Err, Ok, Result
from ..log import logger


def _as_text(value: Any) -> str | None:
    """Coerce a scalar JSON value to ``str``; ``None`` for null/containers."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _as_millis(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, str):
            return int(float(value))
    except (ValueError, OverflowError):
        pass
    return default


def _load_array(text: str) -> Result[list, DecodeError]:
    try:
        data = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        return Err(DecodeError(f"payload is not valid JSON: {exc}"))
    if not isinstance(data, list):
        return Err(DecodeError(f"expected a JSON array, got {type(data).__name__}"))
    return Ok(data)


def decode_note(element: dict, now: int | None = None) -> Note | None:
    """Build a :class:`Note` from one array element.

    Returns ``None`` when ``id`` or ``title`` is missing.
    """
    note_id = _as_text(element.get("id"))
    title = _as_text(element.get("title"))
    if note_id is None or title is None:
        return None
    content = _as_text(element.get("content"))
    return Note(
        id=note_id,
        title=title,
        content=content if content is not None else "",
        updated_at=_as_millis(
            element.get("updatedAt"), now_ms() if now is None else now
        ),
    )


def decode(text: str, now: int | None = None) -> Result[NoteSet, DecodeError]:
    """Parse *text* into notes in decode order.

    Incomplete elements are skipped.  The whole call fails (``Err``) if the
    payload is not an array of objects.  Among elements sharing an ``id``
    the later one wins and takes the later position.
    """
    loaded = _load_array(text)
    if not loaded.ok:
        return loaded

    by_id: dict[str, Note] = {}
    skipped = 0
    for index, element in enumerate(loaded.value):
        if not isinstance(element, dict):
            return Err(DecodeError(f"element {index} is not an object"))
        note = decode_note(element, now)
        if note is None:
            skipped += 1
            continue
        by_id.pop(note.id, None)
        by_id[note.id] = note

    if skipped:
        logger.debug("skipped %d incomplete note(s)", skipped)
    return Ok(list(by_id.values()))


def decode_ids(text: str) -> Result[PinnedIdSet, DecodeError]:
    """Parse a pinned-id payload; duplicates keep their first position."""
    loaded = _load_array(text)
    if not loaded.ok:
        return loaded

    ids: PinnedIdSet = []
    for value in loaded.value:
        note_id = _as_text(value)
        if note_id is not None and note_id not in ids:
            ids.append(note_id)
    return Ok(ids)

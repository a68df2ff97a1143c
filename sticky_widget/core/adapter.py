"""Display adapter: positional access to the current display list.

The adapter is the only writer of its :data:`DisplayList`.  A rebuild runs
the loader to completion and then swaps the new tuple in under a lock, so
a reader sees either the previous list or the new one.  Renderers hold no
positions across a "data changed" notification; they re-query by index.
"""

from __future__ import annotations

import threading
from typing import Callable

from .constants import UNTITLED
from .models import DisplayList, Note, NoteView
from ..log import logger

Listener = Callable[[DisplayList], object]


class DisplayAdapter:
    """Expose a display list to a list-style renderer.

    Parameters
    ----------
    loader:
        Callable producing a fresh display list (normally a
        :class:`~sticky_widget.core.pipeline.NotePipeline`).
    placeholder_title:
        Title rendered for notes with an empty title.
    """

    def __init__(
        self,
        loader: Callable[[], DisplayList],
        *,
        placeholder_title: str = UNTITLED,
    ) -> None:
        self._loader = loader
        self._placeholder = placeholder_title
        self._lock = threading.RLock()
        self._items: DisplayList = ()
        self._loaded = False
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def on_create(self) -> None:
        """Initial load."""
        self._rebuild()

    def on_data_changed(self) -> None:
        """Discard the cached list and rebuild it now."""
        self._rebuild()

    def on_destroy(self) -> None:
        with self._lock:
            self._items = ()
            self._loaded = False

    def _rebuild(self) -> None:
        with self._lock:
            items = tuple(self._loader())
            self._items = items
            self._loaded = True
            listeners = list(self._listeners)
        logger.debug("display adapter rebuilt with %d item(s)", len(items))
        for listener in listeners:
            listener(items)

    # ------------------------------------------------------------------
    # Listeners ("view data changed")
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> DisplayList:
        """The current list, loading it first if nothing was loaded yet."""
        with self._lock:
            if not self._loaded:
                self._items = tuple(self._loader())
                self._loaded = True
            return self._items

    def count(self) -> int:
        return len(self.snapshot())

    def item_at(self, position: int) -> Note | None:
        """Note at *position*, or ``None`` outside ``[0, count())``."""
        items = self.snapshot()
        if 0 <= position < len(items):
            return items[position]
        return None

    def id_at(self, position: int) -> str | None:
        note = self.item_at(position)
        return note.id if note is not None else None

    def view_at(self, position: int) -> NoteView | None:
        """Render data for *position*, or ``None`` when out of range."""
        note = self.item_at(position)
        if note is None:
            logger.debug("no view for position %d", position)
            return None
        return NoteView(
            title=note.display_title(self._placeholder),
            content=note.content or "",
            note_id=note.id,
        )

    def item_id_for(self, position: int) -> int:
        """Positional identity: the id of a row is its index."""
        return position

    def has_stable_ids(self) -> bool:
        return True

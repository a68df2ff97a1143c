"""Read -> decode -> reconcile for one widget refresh."""

from __future__ import annotations

from .constants import DISPLAY_LIMIT, NOTES_KEY, WIDGET_NOTES_KEY
from .decoder import decode, decode_ids
from .models import DisplayList, NoteSet, PinnedIdSet
from .persistence import StoreReader
from .reconciler import reconcile
from ..log import logger


class NotePipeline:
    """Produce the display list from the notes app's storage.

    A corrupt record only empties its own contribution: malformed notes
    give an empty note set, a malformed pinned list gives no pins.
    """

    def __init__(
        self,
        reader: StoreReader,
        limit: int = DISPLAY_LIMIT,
        *,
        notes_key: str = NOTES_KEY,
        pinned_key: str = WIDGET_NOTES_KEY,
    ) -> None:
        self.reader = reader
        self.limit = limit
        self.notes_key = notes_key
        self.pinned_key = pinned_key

    def load_notes(self) -> NoteSet:
        decoded = decode(self.reader.read(self.notes_key))
        if not decoded.ok:
            logger.warning("malformed notes payload: %s", decoded.error)
            return []
        logger.debug("decoded %d note(s)", len(decoded.value))
        return decoded.value

    def load_pinned_ids(self) -> PinnedIdSet:
        decoded = decode_ids(self.reader.read(self.pinned_key))
        if not decoded.ok:
            logger.warning("malformed pinned-notes payload: %s", decoded.error)
            return []
        return decoded.value

    def load(self) -> DisplayList:
        """Run the whole pipeline; never raises for bad data."""
        display = reconcile(self.load_notes(), self.load_pinned_ids(), self.limit)
        logger.debug("display list: %s", [n.id for n in display])
        return display

    __call__ = load

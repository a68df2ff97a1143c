"""Raw store reader: key -> normalized serialized-array text.

The notes app writes AsyncStorage records that are not always plain JSON
arrays: some are JSON strings wrapping the array, some are empty, some
hold a single bare object.  :class:`StoreReader` smooths those over and
substitutes a fallback when a record is missing or unreadable, so the
decoder only ever sees array-shaped text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from ._base import FileStore
from .fallback import default_notes_payload
from ..constants import EMPTY_ARRAY, NOTES_KEY, STORAGE_FILE_PREFIX
from ...log import logger


def normalize_payload(raw: str) -> str:
    """Coerce raw record text into serialized-array text.

    1. ``"..."`` with backslash-escaped interior quotes is unwrapped.
    2. Empty content becomes ``[]``.
    3. Anything not starting with ``[`` is wrapped in ``[`` ... ``]``.

    The result is not validated as JSON.
    """
    # Records are read line by line and joined, as the app's native side does
    content = "".join(raw.splitlines()).strip()
    if len(content) >= 2 and content.startswith('"') and content.endswith('"'):
        content = content[1:-1].replace('\\"', '"')
        logger.debug("unwrapped quoted storage payload")
    if not content:
        content = EMPTY_ARRAY
    if not content.startswith("["):
        logger.warning("storage payload is not an array, wrapping: %.50s", content)
        content = f"[{content}]"
    return content


class StoreReader(FileStore):
    """Read storage records, falling back when they are absent or unusable.

    Parameters
    ----------
    directory:
        The notes app's storage directory.
    fallbacks:
        ``{key: provider}`` for keys whose absence must not leave the widget
        empty.  Defaults to the placeholder notes for ``@sticky_notes``.
        Every other key falls back to ``[]``.
    """

    def __init__(
        self,
        directory: Path,
        prefix: str = STORAGE_FILE_PREFIX,
        *,
        fallbacks: dict[str, Callable[[], str]] | None = None,
    ) -> None:
        super().__init__(directory, prefix)
        if fallbacks is None:
            fallbacks = {NOTES_KEY: default_notes_payload}
        self._fallbacks = fallbacks

    def _default(self, key: str) -> str:
        provider = self._fallbacks.get(key)
        if provider is None:
            return EMPTY_ARRAY
        logger.info("using placeholder data for %s", key)
        return provider()

    def has_fallback(self, key: str) -> bool:
        return key in self._fallbacks

    def read(self, key: str) -> str:
        """Return serialized-array text for *key*; never raises."""
        loaded = self.load_raw(key)
        if not loaded.ok:
            logger.warning("storage record unavailable (%s)", loaded.error)
            return self._default(key)

        content = normalize_payload(loaded.value)
        if content == EMPTY_ARRAY and self.has_fallback(key):
            logger.debug("storage record %s is empty", key)
            return self._default(key)
        return content

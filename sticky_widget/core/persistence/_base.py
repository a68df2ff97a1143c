"""Base read-only storage store."""

from __future__ import annotations

from pathlib import Path

from ..constants import EMPTY_ARRAY, STORAGE_FILE_PREFIX
from ..errors import StoreUnavailable
from ..result import Err, Ok, Result
from ...log import logger


class FileStore:
    """A directory holding one file per storage key.

    Subclasses override ``_default()`` to provide the value used when a
    record cannot be read (``"[]"`` by default).
    """

    def __init__(self, directory: Path, prefix: str = STORAGE_FILE_PREFIX) -> None:
        self.directory = Path(directory)
        self.prefix = prefix

    def path_for(self, key: str) -> Path:
        """Return the file that backs *key*."""
        return self.directory / f"{self.prefix}{key}"

    def list_files(self) -> list[str]:
        """Return the file names in the storage directory (sorted)."""
        try:
            return sorted(p.name for p in self.directory.iterdir())
        except OSError:
            logger.debug("cannot list storage directory %s", self.directory, exc_info=True)
            return []

    # -- core I/O -------------------------------------------------------------

    def load_raw(self, key: str) -> Result[str, StoreUnavailable]:
        """Read the record for *key* as text, without any interpretation."""
        path = self.path_for(key)
        try:
            if not path.is_file():
                return Err(StoreUnavailable(key, f"no record at {path}"))
            return Ok(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("failed to read storage record %s", path, exc_info=True)
            return Err(StoreUnavailable(key, str(exc)))

    # -- override point -------------------------------------------------------

    def _default(self, key: str) -> str:  # noqa: ARG002
        """Return the payload used when *key* cannot be read."""
        return EMPTY_ARRAY

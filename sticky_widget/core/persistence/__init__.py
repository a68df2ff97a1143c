"""Persistence layer – read-only access to the notes app's storage files."""

from ._base import FileStore
from .fallback import default_notes, default_notes_payload
from .reader import StoreReader, normalize_payload

__all__ = [
    "FileStore",
    "StoreReader",
    "default_notes",
    "default_notes_payload",
    "normalize_payload",
]

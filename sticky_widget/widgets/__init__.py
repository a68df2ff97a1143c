"""Textual widgets that render the sticky-notes display list."""

from .note_list import (
    NoteItem,
    NoteListPanel,
    NoteListTitle,
    NoteSelected,
    RefreshRequested,
)

__all__ = [
    "NoteItem",
    "NoteListPanel",
    "NoteListTitle",
    "NoteSelected",
    "RefreshRequested",
]

"""List widget that renders a display adapter, one row per note."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from ..core.adapter import DisplayAdapter
from ..core.models import DisplayList

_MAX_CONTENT_LEN = 80


class NoteSelected(Message):
    """A note row was clicked."""

    def __init__(self, instance_id: int, position: int, note_id: str | None) -> None:
        super().__init__()
        self.instance_id = instance_id
        self.position = position
        self.note_id = note_id


class RefreshRequested(Message):
    """The widget title was clicked."""

    def __init__(self, instance_id: int) -> None:
        super().__init__()
        self.instance_id = instance_id


class NoteListTitle(Static):
    """Title bar. Click to refresh."""

    def on_click(self) -> None:
        panel = self.parent
        if isinstance(panel, NoteListPanel):
            panel.post_message(RefreshRequested(panel.instance_id))


class NoteItem(Static):
    """A single note row. Click to open the note."""

    DEFAULT_CSS = """
    NoteItem {
        padding: 0 1;
        margin: 0 0 1 0;
        height: auto;
        background: $surface-lighten-1;
    }
    NoteItem:hover {
        background: $surface-lighten-2;
    }
    """

    def __init__(self, position: int, title: str, content: str, **kwargs: object) -> None:
        if len(content) > _MAX_CONTENT_LEN:
            content = content[: _MAX_CONTENT_LEN - 3] + "..."
        body = f"[b]{escape(title)}[/b]"
        if content:
            body += f"\n[dim]{escape(content)}[/dim]"
        super().__init__(body, **kwargs)
        self.position = position

    def on_click(self) -> None:
        panel = self.parent.parent if self.parent is not None else None
        if isinstance(panel, NoteListPanel):
            panel.select(self.position)


class NoteListPanel(Widget):
    """One widget instance showing the notes of its adapter.

    The panel keeps no note data of its own; on every data-changed
    notification it re-queries the adapter by position.
    """

    DEFAULT_CSS = """
    NoteListPanel {
        width: 42;
        height: auto;
        max-height: 20;
        margin: 1 2;
        border: round $accent;
        background: $surface;
    }
    NoteListPanel .note-list-title {
        text-style: bold;
        padding: 0 1;
        color: $text;
        background: $accent-darken-2;
    }
    NoteListPanel .note-list-empty {
        padding: 1;
        color: $text-muted;
        text-align: center;
    }
    NoteListPanel #note-list {
        height: auto;
    }
    """

    def __init__(self, instance_id: int, title: str = "Sticky Notes", **kwargs) -> None:
        super().__init__(**kwargs)
        self.instance_id = instance_id
        self._title = title
        self._adapter: DisplayAdapter | None = None

    def compose(self) -> ComposeResult:
        yield NoteListTitle(self._title, classes="note-list-title")
        yield VerticalScroll(id="note-list")

    def on_mount(self) -> None:
        if self._adapter is not None:
            self.render_rows()

    @property
    def adapter(self) -> DisplayAdapter | None:
        return self._adapter

    def attach(self, adapter: DisplayAdapter) -> None:
        """Bind the panel to *adapter* (idempotent)."""
        if self._adapter is adapter:
            return
        if self._adapter is not None:
            self._adapter.remove_listener(self._on_view_data_changed)
        self._adapter = adapter
        adapter.add_listener(self._on_view_data_changed)

    def _on_view_data_changed(self, _items: DisplayList) -> None:
        self.render_rows()

    def render_rows(self) -> None:
        """Rebuild the rows from the adapter."""
        try:
            container = self.query_one("#note-list", VerticalScroll)
        except NoMatches:
            return
        container.remove_children()

        adapter = self._adapter
        count = adapter.count() if adapter is not None else 0
        if count == 0:
            container.mount(Static("No notes", classes="note-list-empty"))
            return

        for position in range(count):
            view = adapter.view_at(position)  # type: ignore[union-attr]
            if view is None:
                continue
            container.mount(NoteItem(position, view.title, view.content))

    def select(self, position: int) -> None:
        """Post a :class:`NoteSelected` for the row at *position*."""
        note_id = self._adapter.id_at(position) if self._adapter is not None else None
        self.post_message(NoteSelected(self.instance_id, position, note_id))

    @property
    def row_count(self) -> int:
        return len(self.query(NoteItem))

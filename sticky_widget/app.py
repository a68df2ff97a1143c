"""Sticky Notes widget host - a terminal "home screen" for the widget."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from .core.adapter import DisplayAdapter
from .core.bridge import WidgetBridge
from .core.models import LaunchRequest
from .core.navigation import handle_click
from .core.persistence import StoreReader
from .core.pipeline import NotePipeline
from .core.refresh import RefreshCoordinator
from .log import logger
from .preferences import Preferences
from .widgets import NoteListPanel, NoteSelected, RefreshRequested

_APP_CSS = """
Screen {
    align: center middle;
}
#home-screen {
    height: auto;
    width: auto;
}
"""


def build_pipeline(prefs: Preferences) -> NotePipeline:
    reader = StoreReader(prefs.storage.directory, prefs.storage.file_prefix)
    return NotePipeline(reader)


class StickyWidgetApp(App):
    """Hosts one or more note-list widgets fed by the notes app's storage."""

    CSS = _APP_CSS
    TITLE = "Sticky Notes"

    BINDINGS = [
        Binding("r", "refresh_widgets", "Refresh", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, prefs: Preferences | None = None) -> None:
        super().__init__()
        self.prefs = prefs or Preferences()
        self.pipeline = build_pipeline(self.prefs)
        self.adapters: dict[int, DisplayAdapter] = {}
        self.coordinator = RefreshCoordinator(
            resolve_instances=self._resolve_instances,
            refresh_instance=self._refresh_instance,
            notify_data_changed=self._notify_data_changed,
        )
        self.bridge = WidgetBridge(self.coordinator, lambda: self.launch)
        self.last_launch: LaunchRequest | None = None
        self.launched: list[subprocess.Popen] = []

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        with Horizontal(id="home-screen"):
            for instance_id in range(1, self.prefs.display.instances + 1):
                yield NoteListPanel(instance_id, id=f"widget-{instance_id}")
        yield Footer()

    def on_mount(self) -> None:
        self.coordinator.on_enabled()

    # ------------------------------------------------------------------
    # Coordinator collaborators
    # ------------------------------------------------------------------

    def _resolve_instances(self) -> list[int]:
        return [panel.instance_id for panel in self.query(NoteListPanel)]

    def _refresh_instance(self, instance_id: int) -> None:
        panel = self.query_one(f"#widget-{instance_id}", NoteListPanel)
        adapter = self.adapters.get(instance_id)
        if adapter is None:
            adapter = DisplayAdapter(
                self.pipeline,
                placeholder_title=self.prefs.display.placeholder_title,
            )
            self.adapters[instance_id] = adapter
        panel.attach(adapter)

    def _notify_data_changed(self, instance_ids: Sequence[int]) -> None:
        for instance_id in instance_ids:
            self.adapters[instance_id].on_data_changed()

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------

    def action_refresh_widgets(self) -> None:
        self.bridge.update_widget()

    def on_refresh_requested(self, event: RefreshRequested) -> None:
        logger.debug("refresh requested from widget %d", event.instance_id)
        self.coordinator.on_update()

    def on_note_selected(self, event: NoteSelected) -> None:
        handle_click(event.note_id, self.launch)

    def launch(self, request: LaunchRequest) -> None:
        """Open the notes app, or say what would be opened."""
        self.last_launch = request
        template = self.prefs.navigation.command
        if not template:
            target = request.note_id or "the notes app"
            self.notify(f"Opening {target}", title="Sticky Notes")
            return
        self._reap_launched()
        try:
            argv = shlex.split(template.format(note_id=request.note_id or ""))
            proc = subprocess.Popen(argv, start_new_session=True)  # noqa: S603
        except (OSError, KeyError, IndexError, ValueError) as exc:
            logger.debug("launch command failed: %s", template, exc_info=True)
            self.notify(f"Could not open note: {exc}", severity="error")
            return
        self.launched.append(proc)

    def _reap_launched(self) -> None:
        """Collect exit codes of finished launch commands."""
        self.launched = [proc for proc in self.launched if proc.poll() is None]


def run_app(prefs: Preferences | None = None) -> None:
    """Run the widget host."""
    app = StickyWidgetApp(prefs)
    app.run()

"""Imperative command surface used by the notes app."""

from __future__ import annotations

from typing import Callable

from .constants import BRIDGE_ERROR_CODE, BRIDGE_NAME
from .errors import BridgeError
from .navigation import Launcher, handle_click
from .refresh import RefreshCoordinator
from ..log import logger


class WidgetBridge:
    """Commands the notes app can call on the widget.

    Each command returns ``True`` on success and raises
    :class:`BridgeError` when it is rejected.
    """

    name = BRIDGE_NAME

    def __init__(
        self,
        coordinator: RefreshCoordinator,
        get_launcher: Callable[[], Launcher | None],
    ) -> None:
        self._coordinator = coordinator
        self._get_launcher = get_launcher

    def update_widget(self) -> bool:
        """Refresh every widget instance."""
        try:
            self._coordinator.on_update()
        except Exception as exc:
            logger.debug("updateWidget failed", exc_info=True)
            raise BridgeError(BRIDGE_ERROR_CODE, str(exc)) from exc
        return True

    def open_note_from_widget(self, note_id: str) -> bool:
        """Open *note_id* in the host app; rejected with no navigation context."""
        launcher = self._get_launcher()
        if launcher is None:
            raise BridgeError(BRIDGE_ERROR_CODE, "No activity available")
        try:
            handle_click(note_id, launcher)
        except Exception as exc:
            logger.debug("openNoteFromWidget failed", exc_info=True)
            raise BridgeError(BRIDGE_ERROR_CODE, str(exc)) from exc
        return True

"""Widget clicks -> host-app launch requests."""

from __future__ import annotations

from typing import Callable

from .models import LaunchRequest
from ..log import logger

Launcher = Callable[[LaunchRequest], object]


def launch_request_for(note_id: str | None) -> LaunchRequest:
    """A click with a note opens it for editing; without one, opens the app."""
    if note_id:
        return LaunchRequest(note_id=note_id, edit_mode=True)
    return LaunchRequest()


def handle_click(note_id: str | None, launcher: Launcher) -> LaunchRequest:
    """Forward a widget click to *launcher* and return the request sent."""
    request = launch_request_for(note_id)
    if request.note_id is None:
        logger.warning("note click received without a note id, opening app")
    else:
        logger.debug("opening note %s", request.note_id)
    launcher(request)
    return request

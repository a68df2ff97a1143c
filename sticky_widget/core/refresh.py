"""Refresh coordinator: fan an update signal out to widget instances.

The coordinator owns no widgets.  It talks to the host through three
callbacks injected at construction time, keeping it decoupled from
Textual.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Callable

from ..log import logger


class RefreshCoordinator:
    """Re-run the pipeline for every active instance on an update signal.

    Parameters
    ----------
    resolve_instances:
        Returns the ids of the currently active widget instances.
    refresh_instance:
        Re-attaches one instance to its data source.
    notify_data_changed:
        Tells the list-bound views of the given instances to re-query.
    """

    def __init__(
        self,
        *,
        resolve_instances: Callable[[], Iterable[int]],
        refresh_instance: Callable[[int], object],
        notify_data_changed: Callable[[Sequence[int]], object],
    ) -> None:
        self._resolve_instances = resolve_instances
        self._refresh_instance = refresh_instance
        self._notify_data_changed = notify_data_changed

    def on_update(self) -> list[int]:
        """Handle an update signal.  Returns the instance ids refreshed.

        Data-changed goes out only after every instance has been refreshed,
        so no instance is notified before it is attached to a source.
        """
        instance_ids = list(self._resolve_instances())
        logger.debug("updating %d widget instance(s)", len(instance_ids))
        for instance_id in instance_ids:
            self._refresh_instance(instance_id)
        self._notify_data_changed(instance_ids)
        return instance_ids

    def on_enabled(self) -> list[int]:
        """First instance placed: same as an update."""
        logger.debug("widget enabled")
        return self.on_update()

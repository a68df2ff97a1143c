"""Package logger for the sticky-notes widget."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("sticky_widget")

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: str = "WARNING",
    file: str | Path | None = None,
    *,
    console: bool = True,
) -> None:
    """Attach a single handler to the package logger.

    Logs go to *file* when given, otherwise to stderr when *console* is set
    (not while Textual owns the terminal).  Calling this again replaces the
    handler.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if file:
        path = Path(file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    elif console:
        handler = logging.StreamHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

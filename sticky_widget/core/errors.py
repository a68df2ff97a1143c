"""Exception types for the widget pipeline.

None of these escape a refresh: the pipeline turns them into fallback or
empty data.  They exist so that recovery is an explicit branch.
"""

from __future__ import annotations


class WidgetError(Exception):
    """Base class for sticky-widget errors."""


class StoreUnavailable(WidgetError):
    """A persisted record is missing, empty or unreadable."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


class DecodeError(WidgetError):
    """A payload is not a serialized array of the expected shape."""


class BridgeError(WidgetError):
    """A bridge command was rejected (``code`` mirrors a promise rejection)."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

"""Note selection, reconciliation and resilient-loading pipeline."""

from .adapter import DisplayAdapter
from .bridge import WidgetBridge
from .decoder import decode, decode_ids
from .errors import BridgeError, DecodeError, StoreUnavailable, WidgetError
from .models import DisplayList, LaunchRequest, Note, NoteView
from .navigation import handle_click
from .pipeline import NotePipeline
from .reconciler import reconcile
from .refresh import RefreshCoordinator
from .result import Err, Ok

__all__ = [
    "BridgeError",
    "DecodeError",
    "DisplayAdapter",
    "DisplayList",
    "Err",
    "LaunchRequest",
    "Note",
    "NotePipeline",
    "NoteView",
    "Ok",
    "RefreshCoordinator",
    "StoreUnavailable",
    "WidgetBridge",
    "WidgetError",
    "decode",
    "decode_ids",
    "handle_click",
    "reconcile",
]

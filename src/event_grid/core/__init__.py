"""Application paths and file-backed persistence."""

from .config import APP_NAME, DATA_DIR, ensure_data_dir
from .event_store import DEFAULT_EVENTS_STATE, EVENTS_STATE_FILE, EventStore

__all__ = [
    "APP_NAME",
    "DATA_DIR",
    "DEFAULT_EVENTS_STATE",
    "EVENTS_STATE_FILE",
    "EventStore",
    "ensure_data_dir",
]

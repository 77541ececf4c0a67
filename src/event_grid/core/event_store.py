from __future__ import annotations

import logging
from copy import deepcopy
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import orjson

from .config import DATA_DIR, ensure_data_dir

logger = logging.getLogger(__name__)

EVENTS_STATE_FILE = DATA_DIR / "events.json"

DEFAULT_EVENTS_STATE: Dict[str, Any] = {
    "events": [],
    "activity": [],
    "counters": {
        "activity": 0,
    },
    "metadata": {"schema_version": 1},
}


class EventStore:
    """JSON-file persistence for events and the activity log."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or EVENTS_STATE_FILE
        self._state: Optional[Dict[str, Any]] = None

    def _ensure_materialized(self) -> None:
        if self._state is not None:
            return
        if not self._path.exists():
            ensure_data_dir(self._path.parent)
            self._state = deepcopy(DEFAULT_EVENTS_STATE)
            self.persist()
            logger.info("Created event store at %s", self._path)
            return
        raw = self._path.read_bytes()
        if not raw:
            self._state = deepcopy(DEFAULT_EVENTS_STATE)
            return
        self._state = orjson.loads(raw)
        # Backfill missing keys when upgrading.
        for key, value in DEFAULT_EVENTS_STATE.items():
            if key not in self._state:
                self._state[key] = deepcopy(value)

    @property
    def data(self) -> Dict[str, Any]:
        self._ensure_materialized()
        assert self._state is not None
        return self._state

    def persist(self) -> None:
        if self._state is None:
            return
        payload = orjson.dumps(self._state, option=orjson.OPT_INDENT_2)
        self._path.write_bytes(payload + b"\n")

    def mutate(self, callback: Callable[[Dict[str, Any]], Any]) -> Any:
        self._ensure_materialized()
        assert self._state is not None
        result = callback(self._state)
        self.persist()
        return result

    def consume_id(self, state: Dict[str, Any], prefix: str) -> str:
        counters = state.setdefault("counters", {})
        current = counters.get(prefix, 0) + 1
        counters[prefix] = current
        return f"{prefix}_{current:06d}"

    @staticmethod
    def utc_now() -> str:
        return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


__all__ = ["DEFAULT_EVENTS_STATE", "EVENTS_STATE_FILE", "EventStore"]

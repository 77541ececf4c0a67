from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...core import EventStore


@dataclass(slots=True)
class ActivityRepository:
    """Append-only log of logins and event changes."""

    store: EventStore

    def record(
        self,
        action: str,
        *,
        user_id: str,
        event_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        def _append(state: Dict[str, Any]) -> Dict[str, Any]:
            entry = {
                "id": self.store.consume_id(state, "activity"),
                "timestamp": self.store.utc_now(),
                "action": action,
                "user_id": user_id,
                "event_id": event_id,
                "metadata": metadata or {},
            }
            state.setdefault("activity", []).append(entry)
            return entry

        return self.store.mutate(_append)

    def list_recent(self, limit: int = 50) -> List[Dict[str, Any]]:
        entries = self.store.data.get("activity", [])
        return list(reversed(entries[-limit:]))

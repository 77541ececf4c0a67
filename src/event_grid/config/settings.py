from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..core.config import DATA_DIR

load_dotenv()


@dataclass(frozen=True)
class AccountCredential:
    username: str
    password: str
    is_admin: bool = False


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    cors_origins: tuple[str, ...]
    debug: bool


@dataclass(frozen=True)
class AuthSettings:
    session_secret: str
    session_max_age: int
    accounts: tuple[AccountCredential, ...]

    @property
    def is_configured(self) -> bool:
        return bool(self.accounts)


@dataclass(frozen=True)
class StorageSettings:
    events_file: Path


@dataclass(frozen=True)
class LayoutSettings:
    layer_mode: str
    weekday_weight: float
    weekend_weight: float


@dataclass(frozen=True)
class AppSettings:
    server: ServerSettings
    auth: AuthSettings
    storage: StorageSettings
    layout: LayoutSettings
    log_level: str = "INFO"


def parse_accounts(raw: Optional[str]) -> tuple[AccountCredential, ...]:
    """Parse ``user:password[:admin]`` entries separated by commas."""

    accounts: list[AccountCredential] = []
    for entry in (raw or "").split(","):
        entry = entry.strip()
        if not entry:
            continue
        parts = entry.split(":")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise ValueError(f"Invalid account entry {entry!r}; expected user:password[:admin].")
        is_admin = len(parts) > 2 and parts[2].lower() == "admin"
        accounts.append(AccountCredential(username=parts[0], password=parts[1], is_admin=is_admin))
    return tuple(accounts)


def _positive_float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {raw!r}.")
    return value


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    server = ServerSettings(
        host=os.getenv("EVENT_GRID_HOST", "127.0.0.1"),
        port=int(os.getenv("EVENT_GRID_PORT", "8000")),
        cors_origins=tuple(
            origin.strip() for origin in os.getenv("EVENT_GRID_CORS_ORIGINS", "").split(",") if origin.strip()
        ),
        debug=os.getenv("EVENT_GRID_DEBUG", "false").lower() in ("1", "true", "yes"),
    )

    auth = AuthSettings(
        session_secret=os.getenv("EVENT_GRID_SESSION_SECRET", "event-grid-dev-secret"),
        session_max_age=int(os.getenv("EVENT_GRID_SESSION_MAX_AGE", str(24 * 60 * 60))),
        accounts=parse_accounts(os.getenv("EVENT_GRID_ACCOUNTS")),
    )

    storage = StorageSettings(
        events_file=Path(os.getenv("EVENT_GRID_EVENTS_FILE", str(DATA_DIR / "events.json"))),
    )

    layout = LayoutSettings(
        layer_mode=os.getenv("EVENT_GRID_LAYER_MODE", "per_row"),
        weekday_weight=_positive_float_from_env("EVENT_GRID_WEEKDAY_WEIGHT", 1.0),
        weekend_weight=_positive_float_from_env("EVENT_GRID_WEEKEND_WEIGHT", 0.5),
    )

    return AppSettings(
        server=server,
        auth=auth,
        storage=storage,
        layout=layout,
        log_level=os.getenv("EVENT_GRID_LOG_LEVEL", "INFO").upper(),
    )

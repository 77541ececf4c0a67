from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..core import EventStore
from ..data import AccountRepository, ActivityRepository, EventRepository


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, the store and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    store: EventStore = field(init=False)
    events: EventRepository = field(init=False)
    accounts: AccountRepository = field(init=False)
    activity: ActivityRepository = field(init=False)

    def __post_init__(self) -> None:
        self.store = EventStore(self.settings.storage.events_file)
        self.events = EventRepository(store=self.store)
        self.accounts = AccountRepository(accounts=self.settings.auth.accounts)
        self.activity = ActivityRepository(store=self.store)

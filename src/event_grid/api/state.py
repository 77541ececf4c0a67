from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..services import AuthService, CalendarService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    auth: AuthService = field(init=False)
    calendar: CalendarService = field(init=False)

    def __post_init__(self) -> None:
        self.bind(self.context)

    def bind(self, context: Optional[ServiceContext] = None) -> None:
        """Point every service at ``context`` (a fresh one from settings when omitted)."""

        self.context = context or ServiceContext()
        self.auth = AuthService(self.context)
        self.calendar = CalendarService(self.context)


api_state = ApiState()

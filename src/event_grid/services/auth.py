from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain import UserAccount
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthService:
    context: ServiceContext

    def authenticate(self, username: str, password: str) -> Optional[UserAccount]:
        user = self.context.accounts.verify(username, password)
        if user is None:
            logger.info("Rejected login for %r", username)
            return None
        self.context.activity.record("login", user_id=user.id)
        logger.info("User %s signed in (admin=%s)", user.username, user.is_admin)
        return user

    def logout(self, user: Optional[UserAccount]) -> None:
        if user is None:
            return
        self.context.activity.record("logout", user_id=user.id)

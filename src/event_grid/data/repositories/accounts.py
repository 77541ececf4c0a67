from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

from ...config import AccountCredential
from ...domain import UserAccount


@dataclass(slots=True)
class AccountRepository:
    accounts: tuple[AccountCredential, ...]

    def _find(self, username: str) -> Optional[AccountCredential]:
        for account in self.accounts:
            if account.username == username:
                return account
        return None

    def fetch(self, username: str) -> Optional[UserAccount]:
        account = self._find(username)
        if account is None:
            return None
        return UserAccount(id=account.username, username=account.username, is_admin=account.is_admin)

    def verify(self, username: str, password: str) -> Optional[UserAccount]:
        account = self._find(username)
        if account is None:
            return None
        if not secrets.compare_digest(password.encode("utf-8"), account.password.encode("utf-8")):
            return None
        return self.fetch(username)

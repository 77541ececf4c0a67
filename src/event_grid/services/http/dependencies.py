"""FastAPI dependencies for session authentication and shared state."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from ...api import ApiState
from ...domain import UserAccount

SESSION_USER_KEY = "user"


def get_state(request: Request) -> ApiState:
    return request.app.state.api


def session_user(request: Request) -> Optional[UserAccount]:
    payload = request.session.get(SESSION_USER_KEY)
    if not payload:
        return None
    return UserAccount.from_session(payload)


def require_login(request: Request) -> UserAccount:
    user = session_user(request)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user


def require_admin(user: UserAccount = Depends(require_login)) -> UserAccount:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user

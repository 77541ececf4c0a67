from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from ...api import ApiState, call_api, get_api_functions
from ...api.models import EventCreate, EventUpdate, LoginRequest
from ...api.serializers import serialize_event, serialize_layout, serialize_user
from ...domain import UserAccount
from ...layout import FilterSet, LayerMode, check_year_month
from .dependencies import SESSION_USER_KEY, get_state, require_admin, require_login, session_user

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
events_router = APIRouter(prefix="/api/events", tags=["events"])
calendar_router = APIRouter(prefix="/api/calendar", tags=["calendar"])
functions_router = APIRouter(prefix="/api/functions", tags=["functions"])


def _check_year_month(year: int, month: int) -> None:
    try:
        check_year_month(year, month)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid year or month") from exc


@auth_router.post("/login")
async def login(payload: LoginRequest, request: Request, state: ApiState = Depends(get_state)) -> Dict[str, Any]:
    user = state.auth.authenticate(payload.username, payload.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    request.session[SESSION_USER_KEY] = user.to_session()
    return {"success": True, "user": serialize_user(user)}


@auth_router.post("/logout")
async def logout(request: Request, state: ApiState = Depends(get_state)) -> Dict[str, Any]:
    state.auth.logout(session_user(request))
    request.session.clear()
    return {"success": True}


@auth_router.get("/user")
async def current_user(user: UserAccount = Depends(require_login)) -> Dict[str, Any]:
    return serialize_user(user)


@events_router.get("")
async def list_events(
    _: UserAccount = Depends(require_login),
    state: ApiState = Depends(get_state),
) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in state.calendar.list_events()]


@events_router.get("/{year}/{month}")
async def list_events_for_month(
    year: int,
    month: int,
    _: UserAccount = Depends(require_login),
    state: ApiState = Depends(get_state),
) -> List[Dict[str, Any]]:
    _check_year_month(year, month)
    return [serialize_event(event) for event in state.calendar.events_for_month(year, month)]


@events_router.get("/{event_id}")
async def get_event(
    event_id: str,
    _: UserAccount = Depends(require_login),
    state: ApiState = Depends(get_state),
) -> Dict[str, Any]:
    return serialize_event(state.calendar.get_event(event_id))


@events_router.post("", status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: EventCreate,
    user: UserAccount = Depends(require_admin),
    state: ApiState = Depends(get_state),
) -> Dict[str, Any]:
    event = state.calendar.create_event(
        title=payload.title,
        description=payload.description,
        start_date=payload.start_date,
        end_date=payload.end_date,
        category=payload.category,
        industry=payload.industry,
        country=payload.country,
        actor=user,
    )
    return serialize_event(event)


@events_router.put("/{event_id}")
async def update_event(
    event_id: str,
    payload: EventUpdate,
    user: UserAccount = Depends(require_admin),
    state: ApiState = Depends(get_state),
) -> Dict[str, Any]:
    changes = payload.model_dump(exclude_unset=True)
    return serialize_event(state.calendar.update_event(event_id, changes, actor=user))


@events_router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    user: UserAccount = Depends(require_admin),
    state: ApiState = Depends(get_state),
) -> Response:
    state.calendar.delete_event(event_id, actor=user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@calendar_router.get("/{year}/{month}")
async def month_layout(
    year: int,
    month: int,
    internal: bool = True,
    external: bool = True,
    foreign: bool = True,
    industry: Optional[List[str]] = Query(default=None),
    country: Optional[List[str]] = Query(default=None),
    layer_mode: Optional[LayerMode] = None,
    _: UserAccount = Depends(require_login),
    state: ApiState = Depends(get_state),
) -> Dict[str, Any]:
    _check_year_month(year, month)
    try:
        filters = FilterSet.from_params(
            internal=internal,
            external=external,
            foreign=foreign,
            industries=industry,
            countries=country,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    layout = state.calendar.layout_month(date(year, month, 1), filters, layer_mode)
    return serialize_layout(layout, state.calendar.column_model())


class ApiCallRequest(BaseModel):
    arguments: Dict[str, Any] = Field(default_factory=dict)


@functions_router.get("")
async def list_api_functions(_: UserAccount = Depends(require_login)) -> Dict[str, Any]:
    return {"functions": [function.describe() for function in get_api_functions()]}


@functions_router.post("/{function_name}")
async def invoke_api_function(
    function_name: str,
    request: ApiCallRequest,
    _: UserAccount = Depends(require_login),
) -> Dict[str, Any]:
    try:
        result = call_api(function_name, **request.arguments)
    except KeyError as exc:
        logger.warning("API function not found: %s", function_name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (TypeError, ValueError) as exc:
        logger.warning("API function %s rejected arguments: %s", function_name, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    logger.debug("API function %s executed successfully", function_name)
    return {"name": function_name, "result": result}

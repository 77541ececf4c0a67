from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from ...api import ApiState, api_state
from ...bootstrap import configure_logging
from ...domain import EventNotFoundError, InvalidDateRangeError
from .routes import auth_router, calendar_router, events_router, functions_router

logger = logging.getLogger(__name__)


def create_app(state: Optional[ApiState] = None) -> FastAPI:
    state = state or api_state
    settings = state.context.settings

    app = FastAPI(title="Event Grid API", version="0.1.0", debug=settings.server.debug)
    app.state.api = state

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.auth.session_secret,
        max_age=settings.auth.session_max_age,
        same_site="lax",
        https_only=False,
    )
    if settings.server.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.server.cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
            for error in exc.errors()
        ]
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": errors})

    @app.exception_handler(EventNotFoundError)
    async def not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Event not found"})

    @app.exception_handler(InvalidDateRangeError)
    async def invalid_range_handler(request: Request, exc: InvalidDateRangeError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    app.include_router(auth_router)
    app.include_router(events_router)
    app.include_router(calendar_router)
    app.include_router(functions_router)

    if not settings.auth.is_configured:
        logger.warning("No accounts configured; set EVENT_GRID_ACCOUNTS to enable logins.")
    return app


app = create_app()


def run_local_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    import asyncio
    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    settings = api_state.context.settings
    configure_logging(settings.log_level)
    config = Config()
    config.bind = [f"{host or settings.server.host}:{port or settings.server.port}"]
    logger.info("Serving Event Grid API on %s", config.bind[0])
    asyncio.run(serve(app, config))

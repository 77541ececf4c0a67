"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from event_grid.api import api_state
from event_grid.config import (
    AppSettings,
    AuthSettings,
    LayoutSettings,
    ServerSettings,
    StorageSettings,
    parse_accounts,
)
from event_grid.domain import CalendarEvent, EventCategory, Industry
from event_grid.layout import generate_visible_days
from event_grid.services import CalendarService, ServiceContext
from event_grid.services.http import create_app


@pytest.fixture
def make_event():
    """Factory for events from ISO date strings."""

    def _make(event_id, start, end=None, category=EventCategory.INTERNAL, **extra):
        return CalendarEvent(
            id=event_id,
            title=extra.pop("title", f"Event {event_id}"),
            start_date=date.fromisoformat(start),
            end_date=date.fromisoformat(end or start),
            category=category,
            industry=extra.pop("industry", Industry.CROSS_INDUSTRY),
            **extra,
        )

    return _make


@pytest.fixture
def march_2025_days():
    """Visible grid for March 2025: Mon 2025-02-24 .. Sun 2025-04-06."""
    return generate_visible_days(date(2025, 3, 1))


@pytest.fixture
def settings(tmp_path):
    return AppSettings(
        server=ServerSettings(host="127.0.0.1", port=8000, cors_origins=(), debug=False),
        auth=AuthSettings(
            session_secret="test-secret",
            session_max_age=3600,
            accounts=parse_accounts("admin:adminpw:admin,viewer:viewerpw"),
        ),
        storage=StorageSettings(events_file=tmp_path / "events.json"),
        layout=LayoutSettings(layer_mode="per_row", weekday_weight=1.0, weekend_weight=0.5),
    )


@pytest.fixture
def context(settings):
    return ServiceContext(settings=settings)


@pytest.fixture
def calendar(context):
    return CalendarService(context)


@pytest.fixture
def bound_state(context):
    """Point the shared API state at the temporary store for one test."""
    previous = api_state.context
    api_state.bind(context)
    yield api_state
    api_state.bind(previous)


@pytest.fixture
def client(bound_state):
    with TestClient(create_app(bound_state)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "adminpw"})
    assert response.status_code == 200
    return client


@pytest.fixture
def viewer_client(client):
    response = client.post("/api/auth/login", json={"username": "viewer", "password": "viewerpw"})
    assert response.status_code == 200
    return client

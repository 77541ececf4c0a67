from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from .enums import Country, EventCategory, Industry
from .errors import InvalidDateRangeError


def parse_calendar_date(value: Any) -> date:
    """Parse a ``YYYY-MM-DD`` calendar day without going through a UTC instant."""

    if isinstance(value, datetime):
        raise ValueError(f"Expected a calendar day, got a timestamp: {value!r}")
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise ValueError(f"Unsupported calendar date value: {value!r}")


def _parse_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    raise ValueError(f"Unsupported datetime value: {value!r}")


@dataclass(slots=True)
class CalendarEvent:
    id: str
    title: str
    start_date: date
    end_date: date
    category: EventCategory
    industry: Industry = Industry.CROSS_INDUSTRY
    description: Optional[str] = None
    country: Optional[Country] = None
    created_by: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise InvalidDateRangeError(
                f"Event {self.id!r} ends ({self.end_date}) before it starts ({self.start_date})."
            )

    @property
    def duration_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def intersects(self, first: date, last: date) -> bool:
        return self.start_date <= last and self.end_date >= first

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        country = record.get("country")
        return cls(
            id=str(record["id"]),
            title=str(record["title"]),
            description=record.get("description"),
            start_date=parse_calendar_date(record["startDate"]),
            end_date=parse_calendar_date(record["endDate"]),
            category=EventCategory(record["category"]),
            industry=Industry(record.get("industry") or Industry.CROSS_INDUSTRY),
            country=Country(country) if country else None,
            created_by=str(record.get("createdBy") or ""),
            created_at=_parse_datetime(record.get("createdAt")),
            updated_at=_parse_datetime(record.get("updatedAt")),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "startDate": self.start_date.isoformat(),
            "endDate": self.end_date.isoformat(),
            "category": self.category.value,
            "industry": self.industry.value,
            "country": self.country.value if self.country else None,
            "createdBy": self.created_by,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


@dataclass(frozen=True, slots=True)
class UserAccount:
    id: str
    username: str
    is_admin: bool = False

    @classmethod
    def from_session(cls, payload: Dict[str, Any]) -> "UserAccount":
        return cls(
            id=str(payload["id"]),
            username=str(payload["username"]),
            is_admin=bool(payload.get("is_admin", False)),
        )

    def to_session(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username, "is_admin": self.is_admin}

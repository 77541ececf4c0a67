from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..config import category_style, country_label, industry_label
from ..domain import CalendarEvent, Country, EventCategory, Industry, UserAccount
from ..layout import CalendarDay, ColumnModel, MonthLayout, PositionedSegment, SegmentBox, project_segments


class LoginRequest(BaseModel):
    username: str
    password: str


class UserPayload(BaseModel):
    id: str
    username: str
    is_admin: bool = Field(alias="isAdmin")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, user: UserAccount) -> "UserPayload":
        return cls(id=user.id, username=user.username, is_admin=user.is_admin)


class EventCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None)
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    category: EventCategory
    industry: Industry = Field(default=Industry.CROSS_INDUSTRY)
    country: Optional[Country] = Field(default=None)

    @model_validator(mode="after")
    def _check_range(self) -> "EventCreate":
        if self.start_date > self.end_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EventUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None)
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    category: Optional[EventCategory] = Field(default=None)
    industry: Optional[Industry] = Field(default=None)
    country: Optional[Country] = Field(default=None)

    @model_validator(mode="after")
    def _check_range(self) -> "EventUpdate":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("endDate must not be before startDate")
        return self


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = Field(default=None)
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    category: str
    category_label: str = Field(alias="categoryLabel")
    industry: str
    industry_label: str = Field(alias="industryLabel")
    country: Optional[str] = Field(default=None)
    country_label: Optional[str] = Field(default=None, alias="countryLabel")
    created_by: str = Field(alias="createdBy")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            start_date=event.start_date.isoformat(),
            end_date=event.end_date.isoformat(),
            category=event.category.value,
            category_label=category_style(event.category).label,
            industry=event.industry.value,
            industry_label=industry_label(event.industry),
            country=event.country.value if event.country else None,
            country_label=country_label(event.country),
            created_by=event.created_by,
            created_at=_iso(event.created_at),
            updated_at=_iso(event.updated_at),
        )


class CalendarDayPayload(BaseModel):
    date: str
    day_of_month: int = Field(alias="dayOfMonth")
    is_current_month: bool = Field(alias="isCurrentMonth")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, day: CalendarDay) -> "CalendarDayPayload":
        return cls(date=day.date.isoformat(), day_of_month=day.day_of_month, is_current_month=day.is_current_month)


class SegmentPayload(BaseModel):
    event_id: str = Field(alias="eventId")
    row: int
    col: int
    span: int
    layer: int
    is_start: bool = Field(alias="isStart")
    is_end: bool = Field(alias="isEnd")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, segment: PositionedSegment) -> "SegmentPayload":
        return cls(**segment.to_dict())


class SegmentBoxPayload(BaseModel):
    event_id: str = Field(alias="eventId")
    row: int
    left: float
    width: float
    top: float

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, box: SegmentBox) -> "SegmentBoxPayload":
        return cls(event_id=box.event_id, row=box.row, left=box.left, width=box.width, top=box.top)


class MonthLayoutPayload(BaseModel):
    year: int
    month: int
    days: List[CalendarDayPayload]
    events: List[EventPayload]
    segments: List[SegmentPayload]
    row_depths: List[int] = Field(alias="rowDepths")
    column_widths: List[float] = Field(default_factory=list, alias="columnWidths")
    boxes: List[SegmentBoxPayload] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, layout: MonthLayout, columns: Optional[ColumnModel] = None) -> "MonthLayoutPayload":
        columns = columns or ColumnModel()
        return cls(
            year=layout.anchor.year,
            month=layout.anchor.month,
            days=[CalendarDayPayload.from_domain(day) for day in layout.days],
            events=[EventPayload.from_domain(event) for event in layout.events],
            segments=[SegmentPayload.from_domain(segment) for segment in layout.segments],
            row_depths=layout.row_depths(),
            column_widths=[columns.width(col) for col in range(len(columns.weights))],
            boxes=[SegmentBoxPayload.from_domain(box) for box in project_segments(layout.segments, columns)],
        )


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None

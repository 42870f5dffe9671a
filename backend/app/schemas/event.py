"""Event Schemas — write payload, response and calendar shapes for /api/events.

Invariants:
    - startDate/endDate accepted as raw strings; parsing and range checks
      happen in core/event_dates.py (400 with the domain message)
    - category accepts English keys or Russian labels, stored as the key
"""

from datetime import datetime
from typing import Any

from app.schemas.common import CamelModel, ContentBlock


class EventWrite(CamelModel):
    title: str | None = None
    author_id: str | None = None
    content: list[ContentBlock] | None = None
    image_url: str | None = None
    image_caption: str | None = None
    category: str | None = None
    tags: Any = None
    tech_tags: Any = None
    start_date: str | None = None
    end_date: str | None = None
    time_mode: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    address: str | None = None
    is_on_landing: bool = False


class EventResponse(CamelModel):
    id: str
    title: str
    author_id: str
    content: list[dict]
    image_url: str | None = None
    image_caption: str | None = None
    category: str
    tags: list[str]
    tech_tags: list[str]
    start_date: datetime
    end_date: datetime | None = None
    date_type: str
    time_mode: str
    start_time: str | None = None
    end_time: str | None = None
    address: str
    is_on_landing: bool
    created_at: datetime
    updated_at: datetime | None = None


class CalendarEvent(CamelModel):
    id: str
    title: str
    category: str | None = None
    tag: str
    image: str
    location: str
    time: str
    start_date: str
    end_date: str
    date_range_label: str
    url: str


class CalendarMonth(CamelModel):
    year: int
    month: int
    days_in_month: int
    first_weekday: int
    event_days: list[int]


class CalendarResponse(CamelModel):
    date: str
    featured: list[CalendarEvent]
    ongoing: list[CalendarEvent]
    month: CalendarMonth

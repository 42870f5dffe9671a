"""Event Calendar — pure day/month views over events for the public calendar page.

Invariants:
    - All dates are compared at UTC-midnight granularity
    - An event without an end date lasts exactly its start day
    - "featured" = events starting or ending on the day; "ongoing" = strictly inside
    - At most MAX_ONGOING ongoing events are returned per day
    - Events without a parseable start date are skipped, never raise
"""

import calendar as _calendar
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

from app.core.categories import EVENT_CATEGORY_LABELS, normalize_event_category
from app.core.domain_types import TimeMode
from app.core.event_dates import parse_date, to_utc_midnight

MAX_ONGOING = 4
DEFAULT_TAG = "Событие"
DEFAULT_LOCATION = "Место уточняется"
TIME_TBD = "Время уточняется"

# Genitive month names ("1 мая"), index 1..12
_MONTHS_GENITIVE = (
    "", "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
)


@dataclass(frozen=True)
class CalendarEntry:
    id: str
    title: str
    category: str | None
    tag: str
    image: str
    location: str
    time: str
    start: datetime
    end: datetime
    date_range_label: str
    url: str

    def covers(self, day: datetime) -> bool:
        return self.start <= day <= self.end

    def is_boundary(self, day: datetime) -> bool:
        return day == self.start or day == self.end

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "tag": self.tag,
            "image": self.image,
            "location": self.location,
            "time": self.time,
            "startDate": self.start.date().isoformat(),
            "endDate": self.end.date().isoformat(),
            "dateRangeLabel": self.date_range_label,
            "url": self.url,
        }


def format_day(value: datetime, with_year: bool = False) -> str:
    label = f"{value.day} {_MONTHS_GENITIVE[value.month]}"
    return f"{label} {value.year}" if with_year else label


def format_range_label(start: datetime, end: datetime) -> str:
    """'5 мая 2025' for one day, '5 мая – 7 июня 2025' for a range."""
    if start == end:
        return format_day(start, with_year=True)
    same_year = start.year == end.year
    return f"{format_day(start, with_year=not same_year)} – {format_day(end, with_year=True)}"


def format_time_label(
    mode: object, start_time: object, end_time: object,
) -> str:
    start = start_time.strip() if isinstance(start_time, str) else ""
    end = end_time.strip() if isinstance(end_time, str) else ""
    if mode == TimeMode.START.value and start:
        return f"Начало в {start}"
    if mode == TimeMode.RANGE.value and start and end:
        return f"{start} – {end}"
    return TIME_TBD


def _text(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def to_calendar_entry(event: Mapping[str, object]) -> CalendarEntry | None:
    """Build a calendar entry from an event document in API (camelCase) shape."""
    start_raw = parse_date(event.get("startDate"))
    if start_raw is None:
        return None
    start = to_utc_midnight(start_raw)
    end_raw = parse_date(event.get("endDate"))
    end = to_utc_midnight(end_raw) if end_raw else start
    end = max(end, start)

    category = normalize_event_category(event.get("category"))
    tag = EVENT_CATEGORY_LABELS.get(category, DEFAULT_TAG)
    event_id = str(event.get("id", ""))
    return CalendarEntry(
        id=event_id,
        title=_text(event.get("title"), DEFAULT_TAG),
        category=category.value if category else None,
        tag=tag,
        image=_text(event.get("imageUrl"), ""),
        location=_text(event.get("address"), DEFAULT_LOCATION),
        time=format_time_label(
            event.get("timeMode"), event.get("startTime"), event.get("endTime"),
        ),
        start=start,
        end=end,
        date_range_label=format_range_label(start, end),
        url=f"/events/{event_id}",
    )


def build_entries(events: Iterable[Mapping[str, object]]) -> list[CalendarEntry]:
    entries = [e for e in (to_calendar_entry(ev) for ev in events) if e]
    return sorted(entries, key=lambda e: e.start)


def pick_initial_day(entries: list[CalendarEntry], today: datetime) -> datetime:
    """Today if something is on; otherwise the start of the nearest upcoming event."""
    today = to_utc_midnight(today)
    if any(e.covers(today) for e in entries):
        return today
    upcoming = [e for e in entries if e.start >= today]
    return upcoming[0].start if upcoming else today


def build_calendar_day(
    entries: list[CalendarEntry], day: datetime, category: str | None = None,
) -> dict:
    day = to_utc_midnight(day)
    on_day = [e for e in entries if e.covers(day)]
    if category:
        on_day = [e for e in on_day if e.category == category]
    featured = [e for e in on_day if e.is_boundary(day)]
    ongoing = [e for e in on_day if not e.is_boundary(day)][:MAX_ONGOING]
    return {
        "date": day.date().isoformat(),
        "featured": [e.to_dict() for e in featured],
        "ongoing": [e.to_dict() for e in ongoing],
    }


def month_event_days(entries: list[CalendarEntry], year: int, month: int) -> list[int]:
    """Days of the month on which some event starts or ends."""
    days_in_month = _calendar.monthrange(year, month)[1]
    days = set()
    for entry in entries:
        for boundary in (entry.start, entry.end):
            if boundary.year == year and boundary.month == month:
                days.add(boundary.day)
    return sorted(d for d in days if 1 <= d <= days_in_month)


def month_layout(year: int, month: int) -> dict:
    """Month header data: days count and Monday-based weekday of the 1st."""
    first = datetime(year, month, 1, tzinfo=timezone.utc)
    return {
        "year": year,
        "month": month,
        "daysInMonth": _calendar.monthrange(year, month)[1],
        "firstWeekday": first.weekday(),
    }

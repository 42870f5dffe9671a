"""Calendar View — loads events and assembles the public calendar payload.

Invariants:
    - Day selection and grouping are delegated to core/calendar.py (pure)
    - No date given: today if an event covers it, else the nearest upcoming start
"""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.calendar import (
    build_calendar_day, build_entries, month_event_days, month_layout,
    pick_initial_day,
)
from app.core.event_dates import to_utc_midnight
from app.models.event import Event
from app.schemas.event import EventResponse


async def load_calendar(
    db: AsyncSession, day: datetime | None, category: str | None = None,
    today: datetime | None = None,
) -> dict:
    result = await db.execute(select(Event).order_by(Event.start_date))
    events = [
        EventResponse.model_validate(e).model_dump(by_alias=True, mode="json")
        for e in result.scalars().all()
    ]
    entries = build_entries(events)
    if day is None:
        day = pick_initial_day(entries, today or datetime.now(timezone.utc))
    day = to_utc_midnight(day)

    view = build_calendar_day(entries, day, category)
    view["month"] = {
        **month_layout(day.year, day.month),
        "eventDays": month_event_days(entries, day.year, day.month),
    }
    return view

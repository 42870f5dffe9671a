"""Events — CRUD plus the public calendar view.

Invariants:
    - category must be exhibition/concert/performance (Russian labels accepted)
    - startDate required; endDate never earlier than startDate
    - timeMode start/range requires valid HH:MM times; range must end after it starts
    - Setting isOnLanding clears it on every other event
    - /calendar is declared before /{event_id} so it is not captured as an id
"""

from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.categories import normalize_event_category
from app.core.domain_types import Collection
from app.core.documents import build_event, validate_event
from app.core.errors import ContentValidationError
from app.infrastructure.database import get_db
from app.models.event import Event
from app.schemas.event import CalendarResponse, EventResponse, EventWrite
from app.services.calendar_view import load_calendar
from app.services.document_store import (
    create_document, delete_document, get_or_404, prepare_fields,
    update_document,
)

router = APIRouter(prefix="/api/events", tags=["events"])


def _category_filter(value: str | None) -> str | None:
    if not value:
        return None
    category = normalize_event_category(value)
    if category is None:
        raise ContentValidationError("Unsupported event category", field="category")
    return category.value


@router.get("", response_model=list[EventResponse])
async def list_events(
    category: str | None = Query(None),
    on_landing: bool | None = Query(None, alias="onLanding"),
    db: AsyncSession = Depends(get_db),
):
    """List events, latest start date first."""
    query = select(Event).order_by(Event.start_date.desc())
    category_key = _category_filter(category)
    if category_key:
        query = query.where(Event.category == category_key)
    if on_landing is not None:
        query = query.where(Event.is_on_landing.is_(on_landing))
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(
    day: date | None = Query(None, alias="date"),
    category: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Featured and ongoing events for one day, plus the month's event days."""
    selected = (
        datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
        if day else None
    )
    return await load_calendar(db, selected, _category_filter(category))


@router.post(
    "", response_model=EventResponse, status_code=status.HTTP_201_CREATED,
)
async def create_event(body: EventWrite, db: AsyncSession = Depends(get_db)):
    fields = prepare_fields(
        Collection.EVENTS, body.model_dump(), validate_event, build_event,
    )
    return await create_document(db, Event, Collection.EVENTS, fields)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: str, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Event, event_id, "Event")


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str, body: EventWrite, db: AsyncSession = Depends(get_db),
):
    fields = prepare_fields(
        Collection.EVENTS, body.model_dump(), validate_event, build_event,
    )
    return await update_document(
        db, Event, Collection.EVENTS, event_id, fields, "Event",
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str, db: AsyncSession = Depends(get_db)):
    await delete_document(db, Event, Collection.EVENTS, event_id, "Event")

"""Document Rules — pure validation + normalization of write payloads per collection.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - validate_* return error dict on violation, None on success
    - build_* assume validate_* passed and return ORM attribute dicts (snake_case)
    - Payloads are plain dicts in snake_case (schema.model_dump())
    - Timestamps are NOT set here — the shell stamps created_at / updated_at

Design Decisions:
    - One validate/build pair per collection, sharing the tag and category rules
"""

from app.core.categories import normalize_article_category, normalize_event_category
from app.core.domain_types import TimeMode
from app.core.event_dates import (
    check_date_range, check_time_window, derive_date_type, parse_date,
)
from app.core.tags import normalize_tags, normalize_tech_tags

CONTENT_REQUIRED = "Title, content, and authorId are required"
TITLE_REQUIRED = "Title is required"
SLIDE_REQUIRED = "A flipper needs at least one slide"
NAMES_REQUIRED = "firstName and lastName are required"


def _blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def check_authored_content(payload: dict) -> dict | None:
    """Articles, events and interviews all need title, content and authorId."""
    for field, api_name in (
        ("title", "title"), ("content", "content"), ("author_id", "authorId"),
    ):
        if _blank(payload.get(field)):
            return _error("MISSING_REQUIRED_FIELDS", CONTENT_REQUIRED, api_name)
    return None


def _authored_fields(payload: dict) -> dict:
    return {
        "title": payload["title"],
        "author_id": payload["author_id"],
        "content": payload["content"],
        "image_url": payload.get("image_url"),
        "image_caption": payload.get("image_caption"),
    }


# --- Articles -----------------------------------------------------------------

def validate_article(payload: dict) -> dict | None:
    return check_authored_content(payload)


def build_article(payload: dict) -> dict:
    mapped = normalize_article_category(payload.get("category"))
    return {
        **_authored_fields(payload),
        "lead": payload.get("lead") or "",
        "category": mapped.category,
        "tags": normalize_tags(payload.get("tags")),
        "tech_tags": normalize_tech_tags(payload.get("tech_tags")),
        "is_hot_content": bool(payload.get("is_hot_content")) or mapped.is_hot_content,
        "is_news": bool(payload.get("is_news")) or mapped.is_news,
        "is_on_landing": bool(payload.get("is_on_landing")),
        "is_main_in_category": bool(payload.get("is_main_in_category")),
    }


# --- Events -------------------------------------------------------------------

def _time_mode(payload: dict) -> TimeMode | None:
    raw = payload.get("time_mode") or TimeMode.NONE.value
    try:
        return TimeMode(raw)
    except ValueError:
        return None


def validate_event(payload: dict) -> dict | None:
    error = check_authored_content(payload)
    if error:
        return error
    if normalize_event_category(payload.get("category")) is None:
        return _error("UNSUPPORTED_CATEGORY", "Unsupported event category", "category")

    start = parse_date(payload.get("start_date"))
    raw_end = payload.get("end_date")
    end = parse_date(raw_end) if raw_end else None
    if raw_end and end is None:
        return _error("INVALID_END_DATE", "Finish date is not a valid date", "endDate")
    error = check_date_range(start, end)
    if error:
        return error

    mode = _time_mode(payload)
    if mode is None:
        return _error("UNSUPPORTED_TIME_MODE", "Unsupported time mode", "timeMode")
    return check_time_window(mode, payload.get("start_time"), payload.get("end_time"))


def build_event(payload: dict) -> dict:
    start = parse_date(payload.get("start_date"))
    end = parse_date(payload.get("end_date")) if payload.get("end_date") else None
    mode = _time_mode(payload) or TimeMode.NONE
    return {
        **_authored_fields(payload),
        "category": normalize_event_category(payload.get("category")).value,
        "tags": normalize_tags(payload.get("tags")),
        "tech_tags": normalize_tech_tags(payload.get("tech_tags")),
        "start_date": start,
        "end_date": end,
        "date_type": derive_date_type(start, end).value,
        "time_mode": mode.value,
        "start_time": payload.get("start_time") if mode != TimeMode.NONE else None,
        "end_time": payload.get("end_time") if mode == TimeMode.RANGE else None,
        "address": _text(payload.get("address")),
        "is_on_landing": bool(payload.get("is_on_landing")),
    }


# --- Interviews ---------------------------------------------------------------

def validate_interview(payload: dict) -> dict | None:
    return check_authored_content(payload)


def build_interview(payload: dict) -> dict:
    return {
        **_authored_fields(payload),
        "interviewee": _text(payload.get("interviewee")),
        "lead": payload.get("lead") or "",
        "main_quote": payload.get("main_quote") or "",
        "tags": normalize_tags(payload.get("tags")),
    }


# --- Flippers -----------------------------------------------------------------

def validate_flipper(payload: dict) -> dict | None:
    if _blank(payload.get("title")):
        return _error("TITLE_REQUIRED", TITLE_REQUIRED, "title")
    slides = payload.get("carousel_content")
    if not isinstance(slides, list) or not slides:
        return _error("SLIDE_REQUIRED", SLIDE_REQUIRED, "carouselContent")
    return None


def build_flipper(payload: dict) -> dict:
    return {
        "title": payload["title"],
        "category": payload.get("category"),
        "tags": normalize_tags(payload.get("tags")),
        "tech_tags": normalize_tech_tags(payload.get("tech_tags")),
        "carousel_content": payload["carousel_content"],
    }


# --- Authors & user profiles --------------------------------------------------

def validate_person_names(payload: dict) -> dict | None:
    for field, api_name in (("first_name", "firstName"), ("last_name", "lastName")):
        if not _text(payload.get(field)):
            return _error("NAMES_REQUIRED", NAMES_REQUIRED, api_name)
    return None


def build_person_names(payload: dict) -> dict:
    return {
        "first_name": _text(payload.get("first_name")),
        "last_name": _text(payload.get("last_name")),
    }


def _error(code: str, message: str, field: str) -> dict:
    return {"error_code": code, "message": message, "field": field}

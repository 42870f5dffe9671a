"""Calendar — public calendar grouping and Russian labels.

Tests:
    - Boundary days are featured, days strictly inside a range are ongoing
    - Ongoing capped at MAX_ONGOING
    - Labels: range, time, defaults for missing fields
"""

from datetime import datetime, timezone

from app.core.calendar import (
    DEFAULT_LOCATION, MAX_ONGOING, TIME_TBD,
    build_calendar_day, build_entries, format_range_label, format_time_label,
    month_event_days, month_layout, pick_initial_day, to_calendar_entry,
)


def _day(y, m, d):
    return datetime(y, m, d, tzinfo=timezone.utc)


def _event(event_id, start, end=None, **extra):
    return {"id": event_id, "title": f"Event {event_id}", "startDate": start,
            "endDate": end, "category": "exhibition", **extra}


def test_range_label_same_year():
    assert format_range_label(_day(2025, 5, 5), _day(2025, 6, 7)) == "5 мая – 7 июня 2025"


def test_range_label_across_years():
    assert format_range_label(_day(2024, 12, 30), _day(2025, 1, 2)) == (
        "30 декабря 2024 – 2 января 2025"
    )


def test_range_label_single_day():
    assert format_range_label(_day(2025, 5, 5), _day(2025, 5, 5)) == "5 мая 2025"


def test_time_labels():
    assert format_time_label("start", "19:00", None) == "Начало в 19:00"
    assert format_time_label("range", "19:00", "21:00") == "19:00 – 21:00"
    assert format_time_label("range", "19:00", "") == TIME_TBD
    assert format_time_label("none", "19:00", None) == TIME_TBD


def test_entry_defaults_and_url():
    entry = to_calendar_entry(_event("e1", "2025-05-17"))
    assert entry.end == entry.start
    assert entry.location == DEFAULT_LOCATION
    assert entry.tag == "Выставка"
    assert entry.url == "/events/e1"
    assert entry.to_dict()["startDate"] == "2025-05-17"


def test_entry_without_start_is_skipped():
    assert to_calendar_entry({"id": "x", "title": "No date"}) is None
    assert build_entries([{"id": "x"}, _event("e1", "2025-05-17")])[0].id == "e1"


def test_end_before_start_clamped():
    entry = to_calendar_entry(_event("e1", "2025-05-17", "2025-05-10"))
    assert entry.end == entry.start


def test_featured_vs_ongoing():
    entries = build_entries([
        _event("starts", "2025-05-10", "2025-05-20"),
        _event("middle", "2025-05-01", "2025-05-31"),
        _event("ends", "2025-04-01", "2025-05-10"),
    ])
    view = build_calendar_day(entries, _day(2025, 5, 10))
    assert view["date"] == "2025-05-10"
    assert {e["id"] for e in view["featured"]} == {"starts", "ends"}
    assert [e["id"] for e in view["ongoing"]] == ["middle"]


def test_ongoing_capped():
    entries = build_entries([
        _event(f"e{i}", "2025-05-01", "2025-05-31") for i in range(MAX_ONGOING + 2)
    ])
    view = build_calendar_day(entries, _day(2025, 5, 15))
    assert len(view["ongoing"]) == MAX_ONGOING


def test_category_filter():
    entries = build_entries([
        _event("a", "2025-05-10"),
        _event("b", "2025-05-10", category="concert"),
    ])
    view = build_calendar_day(entries, _day(2025, 5, 10), category="concert")
    assert [e["id"] for e in view["featured"]] == ["b"]


def test_month_event_days_only_boundaries_in_month():
    entries = build_entries([
        _event("a", "2025-04-28", "2025-05-03"),
        _event("b", "2025-05-17"),
        _event("c", "2025-06-01"),
    ])
    assert month_event_days(entries, 2025, 5) == [3, 17]


def test_pick_initial_day_prefers_today_then_next_start():
    entries = build_entries([_event("a", "2025-05-20")])
    assert pick_initial_day(entries, _day(2025, 5, 1)) == _day(2025, 5, 20)
    assert pick_initial_day(entries, _day(2025, 5, 20)) == _day(2025, 5, 20)
    assert pick_initial_day(entries, _day(2025, 6, 1)) == _day(2025, 6, 1)


def test_month_layout():
    assert month_layout(2025, 2) == {
        "year": 2025, "month": 2, "daysInMonth": 28, "firstWeekday": 5,
    }

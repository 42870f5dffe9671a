"""Document Rules — validate/build pairs per collection.

Tests:
    - Authored collections share the required-fields message
    - build_* normalizes tags, categories and flags
    - Event validation: category, dates, time mode
"""

from datetime import datetime, timezone

from app.core.documents import (
    CONTENT_REQUIRED, NAMES_REQUIRED, SLIDE_REQUIRED,
    build_article, build_event, build_flipper, build_interview,
    build_person_names, validate_article, validate_event, validate_flipper,
    validate_interview, validate_person_names,
)

BLOCKS = [{"type": "paragraph", "text": "..."}]


def _authored(**overrides):
    payload = {"title": "T", "author_id": "a1", "content": BLOCKS}
    payload.update(overrides)
    return payload


def test_article_requires_title_content_author():
    for missing in ({"title": "  "}, {"content": []}, {"author_id": None}):
        error = validate_article(_authored(**missing))
        assert error["message"] == CONTENT_REQUIRED
    assert validate_article(_authored()) is None


def test_missing_field_reported_in_wire_name():
    assert validate_interview(_authored(author_id=""))["field"] == "authorId"


def test_build_article_lifts_legacy_category():
    fields = build_article(_authored(
        category="hotContent", tags=["a", "a ", ""], tech_tags=["Big Data"],
    ))
    assert fields["category"] == ""
    assert fields["is_hot_content"] is True
    assert fields["tags"] == ["a"]
    assert fields["tech_tags"] == ["big-data"]
    assert fields["lead"] == ""


def test_build_article_news_keeps_explicit_flags():
    fields = build_article(_authored(category="новости", is_on_landing=True))
    assert fields["category"] == "culture"
    assert fields["is_news"] is True
    assert fields["is_on_landing"] is True
    assert fields["is_main_in_category"] is False


def test_event_rejects_unknown_category():
    error = validate_event(_authored(category="lecture", start_date="2025-05-17"))
    assert error["message"] == "Unsupported event category"


def test_event_requires_start_date():
    error = validate_event(_authored(category="concert"))
    assert error["message"] == "Start date is required for event"


def test_event_rejects_unparseable_end_date():
    error = validate_event(_authored(
        category="concert", start_date="2025-05-17", end_date="someday",
    ))
    assert error["error_code"] == "INVALID_END_DATE"


def test_event_rejects_unknown_time_mode():
    error = validate_event(_authored(
        category="concert", start_date="2025-05-17", time_mode="evening",
    ))
    assert error["error_code"] == "UNSUPPORTED_TIME_MODE"


def test_build_event_derives_date_type_and_clears_times():
    fields = build_event(_authored(
        category="Концерт", start_date="2025-05-17", end_date="2025-05-19",
        time_mode="start", start_time="19:00", end_time="22:00",
        address="  Olympia ",
    ))
    assert fields["category"] == "concert"
    assert fields["start_date"] == datetime(2025, 5, 17, tzinfo=timezone.utc)
    assert fields["date_type"] == "duration"
    assert fields["start_time"] == "19:00"
    assert fields["end_time"] is None
    assert fields["address"] == "Olympia"


def test_build_event_time_mode_none_clears_both():
    fields = build_event(_authored(
        category="concert", start_date="2025-05-17", start_time="19:00",
    ))
    assert fields["time_mode"] == "none"
    assert fields["start_time"] is None
    assert fields["date_type"] == "single"


def test_build_interview():
    fields = build_interview(_authored(
        interviewee=" Анна ", main_quote="Цитата", tags=["x", "x"],
    ))
    assert fields["interviewee"] == "Анна"
    assert fields["main_quote"] == "Цитата"
    assert fields["tags"] == ["x"]


def test_flipper_requires_title_and_slide():
    assert validate_flipper({"carousel_content": [{}]})["error_code"] == "TITLE_REQUIRED"
    assert validate_flipper({"title": "F", "carousel_content": []})["message"] == SLIDE_REQUIRED
    assert validate_flipper({"title": "F", "carousel_content": [{"imageUrl": "x"}]}) is None


def test_build_flipper_keeps_slide_order():
    slides = [{"imageUrl": "1"}, {"imageUrl": "2"}]
    assert build_flipper({"title": "F", "carousel_content": slides})["carousel_content"] == slides


def test_person_names_trimmed_and_required():
    assert validate_person_names({"first_name": "Анна", "last_name": " "})["message"] == NAMES_REQUIRED
    assert build_person_names({"first_name": " Анна ", "last_name": " Петрова"}) == {
        "first_name": "Анна", "last_name": "Петрова",
    }

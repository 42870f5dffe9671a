"""Category Normalization — legacy category mapping for articles and events.

Invariants:
    - "hotContent" is not a category: it becomes is_hot_content=True, category ""
    - "news" / "новости" is not a category: it becomes is_news=True, category "culture"
    - Russian dashboard labels map back to their stored keys
    - Event categories are closed (EventCategory); unknown values -> None
"""

from dataclasses import dataclass

from app.core.domain_types import EventCategory

HOT_CONTENT_CATEGORY = "hotContent"
NEWS_FALLBACK_CATEGORY = "culture"
LEGACY_NEWS_CATEGORIES = frozenset({"news", "новости"})

ARTICLE_CATEGORY_LABELS: dict[str, str] = {
    "culture": "Культура",
    "paris": "Париж",
}
_ARTICLE_LABEL_TO_KEY = {label: key for key, label in ARTICLE_CATEGORY_LABELS.items()}

EVENT_CATEGORY_LABELS: dict[EventCategory, str] = {
    EventCategory.EXHIBITION: "Выставка",
    EventCategory.CONCERT: "Концерт",
    EventCategory.PERFORMANCE: "Спектакль",
}
_EVENT_LOOKUP: dict[str, EventCategory] = {
    **{c.value: c for c in EventCategory},
    **{label.lower(): c for c, label in EVENT_CATEGORY_LABELS.items()},
}


@dataclass(frozen=True)
class ArticleCategory:
    """Result of mapping a raw article category."""
    category: str
    is_hot_content: bool = False
    is_news: bool = False


def is_legacy_news_category(value: object) -> bool:
    if value is None:
        return False
    return str(value).strip().lower() in LEGACY_NEWS_CATEGORIES


def normalize_article_category(value: object) -> ArticleCategory:
    """Map a raw article category, lifting legacy categories into flags."""
    if not isinstance(value, str):
        return ArticleCategory(category="")
    trimmed = value.strip()
    if trimmed == HOT_CONTENT_CATEGORY:
        return ArticleCategory(category="", is_hot_content=True)
    if is_legacy_news_category(trimmed):
        return ArticleCategory(category=NEWS_FALLBACK_CATEGORY, is_news=True)
    return ArticleCategory(category=_ARTICLE_LABEL_TO_KEY.get(trimmed, trimmed))


def normalize_event_category(value: object) -> EventCategory | None:
    if not isinstance(value, str):
        return None
    return _EVENT_LOOKUP.get(value.strip().lower())

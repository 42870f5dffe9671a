"""Tag Normalization — pure rules shared by articles, events, interviews and flippers.

Invariants:
    - Output lists preserve first-seen order and contain no duplicates
    - Non-string items and blank strings are dropped, never raise
    - Non-list input normalizes to []
    - Tech tags are ASCII slugs ([a-z0-9-]); editorial tags keep their text
"""

import re
from collections.abc import Iterable, Mapping

_DISALLOWED_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_DASH = re.compile(r"-+")


def slugify_tag(value: str) -> str:
    """'  Modern Art!! ' -> 'modern-art'. Cyrillic-only input yields ''."""
    slug = value.strip().lower()
    slug = _DISALLOWED_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    return _REPEATED_DASH.sub("-", slug)


def _dedupe(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def normalize_tags(
    values: object, legacy_map: Mapping[str, str] | None = None,
) -> list[str]:
    """Trim, drop empties, map legacy titles to values, de-duplicate.

    The API routes call this without a map. legacy_map is for callers
    importing documents whose tags were stored as display titles (e.g.
    "Современное искусство") rather than values ("contemporary-art").
    """
    if not isinstance(values, list):
        return []
    legacy_map = legacy_map or {}
    trimmed = (v.strip() for v in values if isinstance(v, str))
    return _dedupe(legacy_map.get(tag, tag) for tag in trimmed if tag)


def normalize_tech_tags(values: object) -> list[str]:
    """Slugify every string entry and de-duplicate."""
    if not isinstance(values, list):
        return []
    return _dedupe(slugify_tag(v) for v in values if isinstance(v, str))

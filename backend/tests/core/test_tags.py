"""Tag Normalization — editorial tags are trimmed/deduped, tech tags slugified.

Tests:
    - Order of first occurrence is preserved
    - Non-strings, blanks and non-list input never raise
    - legacy_map rewrites old tag titles to stored values
"""

from app.core.tags import normalize_tags, normalize_tech_tags, slugify_tag


def test_slugify_lowercases_and_dashes_whitespace():
    assert slugify_tag("  Modern Art!! ") == "modern-art"


def test_slugify_collapses_repeated_dashes():
    assert slugify_tag("a - b") == "a-b"
    assert slugify_tag("Art & Design") == "art-design"


def test_slugify_drops_cyrillic():
    assert slugify_tag("Выставка") == ""


def test_normalize_tags_trims_and_dedupes_in_order():
    assert normalize_tags([" Париж ", "Кино", "Париж", "", "   "]) == ["Париж", "Кино"]


def test_normalize_tags_drops_non_strings():
    assert normalize_tags(["Кино", 3, None, {"x": 1}]) == ["Кино"]


def test_normalize_tags_non_list_is_empty():
    assert normalize_tags(None) == []
    assert normalize_tags("Кино") == []


def test_normalize_tags_applies_legacy_map_before_dedupe():
    legacy = {"Театр и кино": "theatre"}
    assert normalize_tags(["Театр и кино", "theatre", "Музыка"], legacy) == [
        "theatre", "Музыка",
    ]


def test_normalize_tech_tags_slugifies_and_dedupes():
    assert normalize_tech_tags(["Street Art", "street-art", "Jazz", "Кино"]) == [
        "street-art", "jazz",
    ]


def test_normalize_tech_tags_non_list_is_empty():
    assert normalize_tech_tags({"a": 1}) == []

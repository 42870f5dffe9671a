"""Domain Types — ids and enum values.

Tests:
    - Generated document ids are 20 alphanumeric chars and unique
    - Enum values match the stored strings
"""

from app.core.domain_types import (
    DOCUMENT_ID_LENGTH, Collection, EventCategory, SubscriptionStatus, TimeMode,
    UserRole, new_document_id,
)


def test_new_document_id_shape():
    doc_id = new_document_id()
    assert len(doc_id) == DOCUMENT_ID_LENGTH
    assert doc_id.isalnum()


def test_new_document_ids_are_unique():
    assert len({new_document_id() for _ in range(100)}) == 100


def test_collections():
    assert {c.value for c in Collection} == {
        "articles", "events", "interviews", "flippers", "authors", "users",
    }


def test_enum_values():
    assert [c.value for c in EventCategory] == ["exhibition", "concert", "performance"]
    assert [m.value for m in TimeMode] == ["none", "start", "range"]
    assert UserRole.READER.value == "reader"
    assert SubscriptionStatus.CANCELED.value == "canceled"

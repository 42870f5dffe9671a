"""Exclusive Flags — boolean fields that may be true on at most one document per scope.

Invariants:
    - Declarations are static; scope None means "whole collection"
    - flags_to_reset is PURE: it only reports what the shell must clear
    - A flag is reset on other documents only when the written document sets it
    - A scoped flag with an empty scope value is still reset within that empty scope
"""

from collections.abc import Mapping
from dataclasses import dataclass

from app.core.domain_types import Collection


@dataclass(frozen=True)
class ExclusiveFlag:
    """A flag attribute and the attribute that partitions its uniqueness."""
    collection: Collection
    flag: str
    scope: str | None = None


EXCLUSIVE_FLAGS: tuple[ExclusiveFlag, ...] = (
    ExclusiveFlag(Collection.ARTICLES, "is_on_landing"),
    ExclusiveFlag(Collection.ARTICLES, "is_main_in_category", scope="category"),
    ExclusiveFlag(Collection.EVENTS, "is_on_landing"),
)


@dataclass(frozen=True)
class FlagReset:
    """One batch update: clear `flag` on every other doc matching the scope."""
    flag: str
    scope: str | None
    scope_value: object = None


def flags_for(collection: Collection) -> tuple[ExclusiveFlag, ...]:
    return tuple(f for f in EXCLUSIVE_FLAGS if f.collection == collection)


def flags_to_reset(
    collection: Collection, document: Mapping[str, object],
) -> list[FlagReset]:
    """Resets required after `document` is written to `collection`."""
    resets = []
    for declared in flags_for(collection):
        if not document.get(declared.flag):
            continue
        scope_value = document.get(declared.scope) if declared.scope else None
        resets.append(FlagReset(declared.flag, declared.scope, scope_value))
    return resets

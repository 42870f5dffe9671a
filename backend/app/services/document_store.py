"""Document Store — async persistence shell shared by every collection router.

Invariants:
    - Pure rules (core/documents.py, core/exclusive_flags.py) decide; this module only does IO
    - Validation errors from core/ are raised as ContentValidationError before any write
    - Exclusive-flag resets run in the same transaction as the write that sets the flag
    - Missing documents raise ResourceNotFoundError (404 via the global handler)

Design Decisions:
    - One generic module over per-collection repositories: every collection has the
      same create/read/update/delete lifecycle, only the rules differ
    - Reset is a single UPDATE ... WHERE per flag (batch), not a read-modify-write loop
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection, new_document_id
from app.core.errors import ContentValidationError, ErrorContext, ResourceNotFoundError
from app.core.exclusive_flags import flags_to_reset
from app.db.base import Base
from app.models.author import Author

logger = logging.getLogger(__name__)

Validator = Callable[[dict], dict | None]
Builder = Callable[[dict], dict]


def prepare_fields(
    collection: Collection, payload: dict,
    validate: Validator, build: Builder,
) -> dict:
    """Run the pure validate/build pair, raising on the first violation."""
    error = validate(payload)
    if error:
        logger.info(
            f"Rejected {collection.value} payload: {error['message']}",
            extra={"collection": collection.value, "error_code": error["error_code"]},
        )
        raise ContentValidationError(
            error["message"], field=error.get("field"),
            context=ErrorContext(collection=collection.value),
        )
    return build(payload)


async def get_or_404(
    db: AsyncSession, model: type[Base], document_id: str, resource: str,
):
    document = await db.get(model, document_id)
    if document is None:
        raise ResourceNotFoundError(resource, document_id)
    return document


async def reset_exclusive_flags(
    db: AsyncSession, model: type[Base], collection: Collection,
    document_id: str, fields: dict,
) -> int:
    """Clear exclusive flags on every other document in scope. Returns rows touched."""
    touched = 0
    for reset in flags_to_reset(collection, fields):
        flag_column = getattr(model, reset.flag)
        stmt = (
            update(model)
            .where(model.id != document_id, flag_column.is_(True))
            .values({reset.flag: False})
            .execution_options(synchronize_session=False)
        )
        if reset.scope:
            stmt = stmt.where(getattr(model, reset.scope) == reset.scope_value)
        result = await db.execute(stmt)
        touched += result.rowcount or 0
    if touched:
        logger.info(
            f"Reset exclusive flags on {touched} {collection.value}",
            extra={
                "collection": collection.value, "document_id": document_id,
                "reset_count": touched,
            },
        )
    return touched


async def create_document(
    db: AsyncSession, model: type[Base], collection: Collection, fields: dict,
):
    document = model(id=new_document_id(), **fields)
    db.add(document)
    await db.flush()
    await reset_exclusive_flags(db, model, collection, document.id, fields)
    await db.commit()
    await db.refresh(document)
    logger.info(
        f"Created {collection.value} document",
        extra={"collection": collection.value, "document_id": document.id},
    )
    return document


async def update_document(
    db: AsyncSession, model: type[Base], collection: Collection,
    document_id: str, fields: dict, resource: str,
):
    document = await get_or_404(db, model, document_id, resource)
    for key, value in fields.items():
        setattr(document, key, value)
    document.updated_at = datetime.now(timezone.utc)
    await db.flush()
    await reset_exclusive_flags(db, model, collection, document.id, fields)
    await db.commit()
    await db.refresh(document)
    logger.info(
        f"Updated {collection.value} document",
        extra={"collection": collection.value, "document_id": document.id},
    )
    return document


async def delete_document(
    db: AsyncSession, model: type[Base], collection: Collection,
    document_id: str, resource: str,
) -> None:
    document = await get_or_404(db, model, document_id, resource)
    await db.delete(document)
    await db.commit()
    logger.info(
        f"Deleted {collection.value} document",
        extra={"collection": collection.value, "document_id": document_id},
    )


async def find_author(db: AsyncSession, author_id: str | None) -> Author | None:
    """Denormalized author lookup; a dangling authorId yields None."""
    if not author_id:
        return None
    return await db.get(Author, author_id)

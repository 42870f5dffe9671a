"""Flippers — CRUD for carousel documents.

Invariants:
    - title required, at least one slide required
    - Slides stored in wire shape ({imageUrl, caption}) in their submitted order
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection
from app.core.documents import build_flipper, validate_flipper
from app.infrastructure.database import get_db
from app.models.flipper import Flipper
from app.schemas.flipper import FlipperResponse, FlipperWrite
from app.services.document_store import (
    create_document, delete_document, get_or_404, prepare_fields,
    update_document,
)

router = APIRouter(prefix="/api/flippers", tags=["flippers"])


def _payload(body: FlipperWrite) -> dict:
    payload = body.model_dump(exclude={"carousel_content"})
    if body.carousel_content is not None:
        payload["carousel_content"] = [
            slide.model_dump(by_alias=True) for slide in body.carousel_content
        ]
    return payload


@router.get("", response_model=list[FlipperResponse])
async def list_flippers(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Flipper).order_by(Flipper.created_at.desc()),
    )
    return result.scalars().all()


@router.post(
    "", response_model=FlipperResponse, status_code=status.HTTP_201_CREATED,
)
async def create_flipper(body: FlipperWrite, db: AsyncSession = Depends(get_db)):
    fields = prepare_fields(
        Collection.FLIPPERS, _payload(body), validate_flipper, build_flipper,
    )
    return await create_document(db, Flipper, Collection.FLIPPERS, fields)


@router.get("/{flipper_id}", response_model=FlipperResponse)
async def get_flipper(flipper_id: str, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, Flipper, flipper_id, "Flipper")


@router.put("/{flipper_id}", response_model=FlipperResponse)
async def update_flipper(
    flipper_id: str, body: FlipperWrite, db: AsyncSession = Depends(get_db),
):
    fields = prepare_fields(
        Collection.FLIPPERS, _payload(body), validate_flipper, build_flipper,
    )
    return await update_document(
        db, Flipper, Collection.FLIPPERS, flipper_id, fields, "Flipper",
    )


@router.delete("/{flipper_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flipper(flipper_id: str, db: AsyncSession = Depends(get_db)):
    await delete_document(db, Flipper, Collection.FLIPPERS, flipper_id, "Flipper")

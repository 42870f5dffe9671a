"""Authors — list and create author documents."""

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection, UserRole
from app.core.documents import build_person_names, validate_person_names
from app.infrastructure.database import get_db
from app.models.author import Author
from app.schemas.author import AuthorCreate, AuthorResponse
from app.services.document_store import create_document, prepare_fields

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("", response_model=list[AuthorResponse])
async def list_authors(db: AsyncSession = Depends(get_db)):
    """Authors ordered by last name."""
    result = await db.execute(
        select(Author).order_by(Author.last_name.asc(), Author.first_name.asc()),
    )
    return result.scalars().all()


@router.post(
    "", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED,
)
async def create_author(body: AuthorCreate, db: AsyncSession = Depends(get_db)):
    fields = prepare_fields(
        Collection.AUTHORS, body.model_dump(),
        validate_person_names, build_person_names,
    )
    fields.update(role=UserRole.AUTHOR.value, avatar="")
    return await create_document(db, Author, Collection.AUTHORS, fields)

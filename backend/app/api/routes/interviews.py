"""Interviews — CRUD for interview documents.

Invariants:
    - Same required fields as articles (title, content, authorId)
    - GET /{id} embeds the author document, or null
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection
from app.core.documents import build_interview, validate_interview
from app.infrastructure.database import get_db
from app.models.interview import Interview
from app.schemas.author import AuthorResponse
from app.schemas.interview import InterviewDetail, InterviewResponse, InterviewWrite
from app.services.document_store import (
    create_document, delete_document, find_author, get_or_404,
    prepare_fields, update_document,
)

router = APIRouter(prefix="/api/interviews", tags=["interviews"])


@router.get("", response_model=list[InterviewResponse])
async def list_interviews(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Interview).order_by(Interview.created_at.desc()),
    )
    return result.scalars().all()


@router.post(
    "", response_model=InterviewResponse, status_code=status.HTTP_201_CREATED,
)
async def create_interview(
    body: InterviewWrite, db: AsyncSession = Depends(get_db),
):
    fields = prepare_fields(
        Collection.INTERVIEWS, body.model_dump(),
        validate_interview, build_interview,
    )
    return await create_document(db, Interview, Collection.INTERVIEWS, fields)


@router.get("/{interview_id}", response_model=InterviewDetail)
async def get_interview(interview_id: str, db: AsyncSession = Depends(get_db)):
    interview = await get_or_404(db, Interview, interview_id, "Interview")
    author = await find_author(db, interview.author_id)
    return InterviewDetail.model_validate(interview).model_copy(update={
        "author": AuthorResponse.model_validate(author) if author else None,
    })


@router.put("/{interview_id}", response_model=InterviewResponse)
async def update_interview(
    interview_id: str, body: InterviewWrite, db: AsyncSession = Depends(get_db),
):
    fields = prepare_fields(
        Collection.INTERVIEWS, body.model_dump(),
        validate_interview, build_interview,
    )
    return await update_document(
        db, Interview, Collection.INTERVIEWS, interview_id, fields, "Interview",
    )


@router.delete("/{interview_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_interview(interview_id: str, db: AsyncSession = Depends(get_db)):
    await delete_document(
        db, Interview, Collection.INTERVIEWS, interview_id, "Interview",
    )

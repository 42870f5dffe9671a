"""Articles — CRUD for editorial articles and news items.

Invariants:
    - title, content and authorId required (400 "Title, content, and authorId are required")
    - Category legacy mapping and tag normalization applied on every write
    - Setting isOnLanding / isMainInCategory clears it on the other articles in scope
    - GET /{id} embeds the author document, or null when authorId dangles
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import Collection
from app.core.documents import build_article, validate_article
from app.infrastructure.database import get_db
from app.models.article import Article
from app.schemas.article import ArticleDetail, ArticleResponse, ArticleWrite
from app.schemas.author import AuthorResponse
from app.services.document_store import (
    create_document, delete_document, find_author, get_or_404,
    prepare_fields, update_document,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    category: str | None = Query(None),
    is_news: bool | None = Query(None, alias="isNews"),
    db: AsyncSession = Depends(get_db),
):
    """List articles, newest first."""
    query = select(Article).order_by(Article.created_at.desc())
    if category:
        query = query.where(Article.category == category)
    if is_news is not None:
        query = query.where(Article.is_news.is_(is_news))
    result = await db.execute(query)
    return result.scalars().all()


@router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_article(body: ArticleWrite, db: AsyncSession = Depends(get_db)):
    fields = prepare_fields(
        Collection.ARTICLES, body.model_dump(), validate_article, build_article,
    )
    return await create_document(db, Article, Collection.ARTICLES, fields)


@router.get("/{article_id}", response_model=ArticleDetail)
async def get_article(article_id: str, db: AsyncSession = Depends(get_db)):
    article = await get_or_404(db, Article, article_id, "Article")
    author = await find_author(db, article.author_id)
    return ArticleDetail.model_validate(article).model_copy(update={
        "author": AuthorResponse.model_validate(author) if author else None,
    })


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str, body: ArticleWrite, db: AsyncSession = Depends(get_db),
):
    """Full replace of the editable fields; sets updatedAt."""
    fields = prepare_fields(
        Collection.ARTICLES, body.model_dump(), validate_article, build_article,
    )
    return await update_document(
        db, Article, Collection.ARTICLES, article_id, fields, "Article",
    )


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: str, db: AsyncSession = Depends(get_db)):
    await delete_document(db, Article, Collection.ARTICLES, article_id, "Article")

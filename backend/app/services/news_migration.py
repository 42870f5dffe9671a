"""News Category Migration — moves legacy news/новости articles to the isNews flag.

Invariants:
    - Dry run touches nothing; apply=True commits in one transaction
    - Migrated articles get is_news=True and category "culture"
    - Matching is trim + case-insensitive (core/categories.is_legacy_news_category)
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.categories import NEWS_FALLBACK_CATEGORY, is_legacy_news_category
from app.models.article import Article

logger = logging.getLogger(__name__)


@dataclass
class MigrationReport:
    scanned: int = 0
    matched: list[tuple[str, str]] = field(default_factory=list)
    applied: bool = False

    @property
    def updated(self) -> int:
        return len(self.matched) if self.applied else 0


async def migrate_news_category(
    db: AsyncSession, apply: bool = False,
) -> MigrationReport:
    result = await db.execute(select(Article))
    articles = result.scalars().all()
    report = MigrationReport(scanned=len(articles), applied=apply)

    for article in articles:
        if not is_legacy_news_category(article.category):
            continue
        report.matched.append((article.id, article.title))
        if apply:
            article.is_news = True
            article.category = NEWS_FALLBACK_CATEGORY

    if apply and report.matched:
        await db.commit()
    logger.info(
        f"News migration: {len(report.matched)} of {report.scanned} articles matched",
        extra={"collection": "articles", "updated_count": report.updated},
    )
    return report

"""Migrate legacy news categories — `python -m app.scripts.migrate_news_category [--apply]`.

Articles whose category is "news"/"новости" become isNews=true with category
"culture". Dry run by default: lists what would change and exits.
"""

import argparse
import asyncio

from app.config import get_settings
from app.db.session import create_session_factory
from app.infrastructure.observability import setup_logging
from app.services.news_migration import MigrationReport, migrate_news_category


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Move legacy news-category articles to the isNews flag.",
    )
    parser.add_argument(
        "--apply", action="store_true",
        help="write the changes (default is a dry run)",
    )
    return parser.parse_args(argv)


def format_report(report: MigrationReport) -> str:
    lines = [f"  {doc_id}  {title}" for doc_id, title in report.matched]
    mode = "updated" if report.applied else "would update"
    lines.append(
        f"Scanned {report.scanned} articles, {mode} {len(report.matched)}.",
    )
    if not report.applied and report.matched:
        lines.append("Dry run only. Re-run with --apply to write changes.")
    return "\n".join(lines)


async def run(apply: bool) -> MigrationReport:
    engine, session_factory = create_session_factory(get_settings().database_url)
    try:
        async with session_factory() as db:
            return await migrate_news_category(db, apply=apply)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    report = asyncio.run(run(args.apply))
    print(format_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

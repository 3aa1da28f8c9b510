"""Seed the remote content tables from the bundled book content"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.content.book_content import BOOK_EXERCISES, BOOK_PROMPTS, CHAPTERS
from companion.content.repository import ContentRepository
from companion.content.schemas import SeedReport

logger = logging.getLogger(__name__)


async def _seed_rows(db: AsyncSession, rows, upsert, label, key, report: SeedReport) -> int:
    written = 0
    for row in rows:
        try:
            await upsert(row)
            await db.commit()
            written += 1
            logger.info(f"Seeded {label} {row[key]}")
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error seeding {label} {row[key]}: {e}")
            report.failed.append(f"{label}:{row[key]}")
    return written


async def seed_book_content(db: AsyncSession) -> SeedReport:
    """
    Upsert chapters (keyed by number), book prompts and book exercises (keyed by id).

    A failing row is logged and skipped; the remaining rows are still written.
    """
    repository = ContentRepository(db)
    report = SeedReport()

    logger.info("Starting book content seeding")
    report.chapters = await _seed_rows(db, CHAPTERS, repository.upsert_chapter, "chapter", "number", report)
    report.book_prompts = await _seed_rows(db, BOOK_PROMPTS, repository.upsert_book_prompt, "prompt", "id", report)
    report.book_exercises = await _seed_rows(db, BOOK_EXERCISES, repository.upsert_book_exercise, "exercise", "id", report)
    logger.info(
        f"Book content seeding finished: {report.chapters} chapters, {report.book_prompts} prompts, "
        f"{report.book_exercises} exercises, {len(report.failed)} failed"
    )
    return report

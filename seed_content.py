"""
Content Seeding Entry Point
Upserts the bundled chapters, book prompts and exercises into the database
"""
import asyncio
import logging

from companion.config import get_settings
from companion.content.seed import seed_book_content
from companion.db.postgres import async_session

logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


async def main() -> int:
    async with async_session() as session:
        report = await seed_book_content(session)
    if report.failed:
        logger.error(f"Failed rows: {', '.join(report.failed)}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))

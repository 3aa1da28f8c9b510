"""Content repository for database operations"""
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select, or_, func
from sqlalchemy.ext.asyncio import AsyncSession
from companion.db.models import BookExercise, BookPrompt, Chapter, SavedPrompt
from companion.db.repository import BaseRepository


class ContentRepository(BaseRepository):
    """Repository for the book content tables"""

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def list_chapters(self) -> List[Chapter]:
        stmt = select(Chapter).order_by(Chapter.number)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_book_prompts(
        self,
        chapter: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[BookPrompt]:
        """
        List book prompts ordered by chapter, then sort order.

        Args:
            chapter: Filter by chapter number (optional)
            category: Filter by exact category (optional)
            search: Case-insensitive match in title or prompt text (optional)
        """
        stmt = select(BookPrompt).order_by(BookPrompt.chapter, BookPrompt.sort_order)

        if chapter:
            stmt = stmt.where(BookPrompt.chapter == chapter)
        if category:
            stmt = stmt.where(BookPrompt.category == category)
        if search:
            # Literal substring match; % and _ in the input are not wildcards
            stmt = stmt.where(or_(
                BookPrompt.title.icontains(search, autoescape=True),
                BookPrompt.prompt.icontains(search, autoescape=True),
            ))

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_book_exercises(self, chapter: Optional[int] = None) -> List[BookExercise]:
        stmt = select(BookExercise).order_by(BookExercise.chapter, BookExercise.sort_order)
        if chapter:
            stmt = stmt.where(BookExercise.chapter == chapter)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_book_exercise(self, exercise_id: str) -> Optional[BookExercise]:
        stmt = select(BookExercise).where(BookExercise.id == exercise_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_chapter(self, chapter: dict) -> None:
        await self._upsert(Chapter, chapter, ["number"], ["title", "part"])

    async def upsert_book_prompt(self, prompt: dict) -> None:
        await self._upsert(BookPrompt, prompt, ["id"], [key for key in prompt if key != "id"])

    async def upsert_book_exercise(self, exercise: dict) -> None:
        await self._upsert(BookExercise, exercise, ["id"], [key for key in exercise if key != "id"])


class SavedPromptRepository(BaseRepository):
    """Repository for a user's saved library prompts"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        super().__init__(db, user_id)

    async def save(self, prompt_id: str) -> None:
        """Save a prompt; saving an already saved prompt changes nothing."""
        await self._set_request_claims()
        existing = await self.db.execute(
            select(SavedPrompt).where(SavedPrompt.user_id == self.user_id, SavedPrompt.prompt_id == prompt_id)
        )
        if existing.scalar_one_or_none() is None:
            self.db.add(SavedPrompt(user_id=self.user_id, prompt_id=prompt_id))
        await self.db.commit()

    async def list_prompt_ids(self) -> List[str]:
        await self._set_request_claims()
        stmt = select(SavedPrompt.prompt_id).where(SavedPrompt.user_id == self.user_id).order_by(SavedPrompt.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        await self._set_request_claims()
        stmt = select(func.count()).select_from(SavedPrompt).where(SavedPrompt.user_id == self.user_id)
        result = await self.db.execute(stmt)
        return int(result.scalar() or 0)

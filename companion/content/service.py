"""Content service layer: remote content with bundled fallback"""
import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.content.book_content import BOOK_EXERCISES, BOOK_PROMPTS, CHAPTERS
from companion.content.exceptions import (
    ExerciseNotFoundException,
    LibraryPromptNotFoundException,
    SavePromptFailedException,
    SavedPromptsUnavailableException,
)
from companion.content.exercise_fields import parse_exercise_fields
from companion.content.fallback import DataSource, LookupResult, two_tier_lookup
from companion.content.prompt_library import get_prompt_by_id
from companion.content.repository import ContentRepository, SavedPromptRepository
from companion.content.schemas import BookExerciseSchema, BookPromptSchema, ChapterSchema

logger = logging.getLogger(__name__)


def to_exercise_schema(exercise) -> BookExerciseSchema:
    """Build an exercise schema from an ORM row or a bundled dict, validating its fields."""
    data = exercise if isinstance(exercise, dict) else {
        "id": exercise.id,
        "chapter": exercise.chapter,
        "exercise_number": exercise.exercise_number,
        "title": exercise.title,
        "description": exercise.description,
        "type": exercise.type,
        "fields": exercise.fields,
        "sort_order": exercise.sort_order,
    }
    return BookExerciseSchema(
        **{key: value for key, value in data.items() if key != "fields"},
        fields=parse_exercise_fields(data.get("fields"), data["id"]),
    )


def _filter_local_prompts(chapter: Optional[int], category: Optional[str], search: Optional[str]) -> List[dict]:
    prompts = sorted(BOOK_PROMPTS, key=lambda p: (p["chapter"], p["sort_order"]))
    if chapter:
        prompts = [p for p in prompts if p["chapter"] == chapter]
    if category:
        prompts = [p for p in prompts if p["category"] == category]
    if search:
        q = search.lower()
        prompts = [p for p in prompts if q in p["title"].lower() or q in p["prompt"].lower()]
    return prompts


def _local_exercises(chapter: Optional[int] = None) -> List[dict]:
    exercises = sorted(BOOK_EXERCISES, key=lambda e: (e["chapter"], e["sort_order"]))
    if chapter:
        exercises = [e for e in exercises if e["chapter"] == chapter]
    return exercises


class ContentService:
    """Service layer for book content reads"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = ContentRepository(db)

    async def get_chapters(self) -> LookupResult[List[ChapterSchema]]:
        async def remote():
            return [ChapterSchema.model_validate(row) for row in await self.repository.list_chapters()]

        def local():
            return [ChapterSchema(**chapter) for chapter in CHAPTERS]

        return await two_tier_lookup(remote, local, "chapters", self.db)

    async def get_book_prompts(
        self,
        chapter: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> LookupResult[List[BookPromptSchema]]:
        """
        List book prompts with optional filters.

        A prompt matches the tag filter when it carries any of the requested tags.
        """
        async def remote():
            rows = await self.repository.list_book_prompts(chapter=chapter, category=category, search=search)
            return [BookPromptSchema.model_validate(row) for row in rows]

        def local():
            return [BookPromptSchema(**p) for p in _filter_local_prompts(chapter, category, search)]

        result = await two_tier_lookup(remote, local, "book prompts", self.db)
        if tags:
            result.data = [p for p in result.data if any(tag in p.tags for tag in tags)]
        return result

    async def get_book_exercises(self, chapter: Optional[int] = None) -> LookupResult[List[BookExerciseSchema]]:
        async def remote():
            return [to_exercise_schema(row) for row in await self.repository.list_book_exercises(chapter)]

        def local():
            return [to_exercise_schema(exercise) for exercise in _local_exercises(chapter)]

        return await two_tier_lookup(remote, local, "book exercises", self.db)

    async def get_book_exercise(self, exercise_id: str) -> LookupResult[BookExerciseSchema]:
        """Get one exercise; a row missing remotely is looked up in the bundled content."""
        async def remote():
            row = await self.repository.get_book_exercise(exercise_id)
            return to_exercise_schema(row) if row else None

        def local():
            match = next((e for e in BOOK_EXERCISES if e["id"] == exercise_id), None)
            return to_exercise_schema(match) if match else None

        result = await two_tier_lookup(remote, local, f"exercise {exercise_id}", self.db)
        if result.data is None and result.source == DataSource.REMOTE:
            result = LookupResult(local(), DataSource.LOCAL)
        if result.data is None:
            raise ExerciseNotFoundException(exercise_id)
        return result


class SavedPromptService:
    """Service layer for a user's personal prompt library"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        self.db = db
        self.repository = SavedPromptRepository(db, user_id)

    async def save_prompt(self, prompt_id: str) -> List[str]:
        if get_prompt_by_id(prompt_id) is None:
            raise LibraryPromptNotFoundException(prompt_id)
        try:
            await self.repository.save(prompt_id)
            return await self.repository.list_prompt_ids()
        except SQLAlchemyError as e:
            logger.error(f"Error saving prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise SavePromptFailedException()

    async def list_saved(self) -> List[str]:
        try:
            return await self.repository.list_prompt_ids()
        except SQLAlchemyError as e:
            logger.error(f"Error loading saved prompts: {e}")
            await self.db.rollback()
            raise SavedPromptsUnavailableException()

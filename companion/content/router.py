from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user
from companion.auth.models import CurrentUser
from companion.content import prompt_library
from companion.content.exceptions import LibraryPromptNotFoundException
from companion.content.schemas import (
    BookExerciseListResponse,
    BookExerciseResponse,
    BookPromptListResponse,
    ChapterListResponse,
    PromptLibraryResponse,
    PromptTemplateSchema,
    SavedPromptsResponse,
    SeedReport,
)
from companion.content.seed import seed_book_content
from companion.content.service import ContentService, SavedPromptService
from companion.db.postgres import get_db

router = APIRouter(
    prefix="/content",
    tags=["content"],
)


@router.get("/chapters", response_model=ChapterListResponse)
async def list_chapters(db: AsyncSession = Depends(get_db)):
    """List the book's chapters. Served from bundled content when the database is unavailable."""
    result = await ContentService(db).get_chapters()
    return ChapterListResponse(chapters=result.data, source=result.source)


@router.get("/prompts", response_model=BookPromptListResponse)
async def list_book_prompts(
    chapter: Optional[int] = Query(None, ge=1),
    category: Optional[str] = None,
    search: Optional[str] = None,
    tags: Optional[List[str]] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """
    List prompts printed in the book.

    Query parameters:
    - chapter: chapter number
    - category: exact category
    - search: case-insensitive match in title or prompt text
    - tags: repeatable, matches prompts carrying any of them
    """
    result = await ContentService(db).get_book_prompts(
        chapter=chapter, category=category, search=search, tags=tags
    )
    return BookPromptListResponse(prompts=result.data, count=len(result.data), source=result.source)


@router.get("/exercises", response_model=BookExerciseListResponse)
async def list_book_exercises(
    chapter: Optional[int] = Query(None, ge=1),
    db: AsyncSession = Depends(get_db),
):
    result = await ContentService(db).get_book_exercises(chapter)
    return BookExerciseListResponse(exercises=result.data, count=len(result.data), source=result.source)


@router.get("/exercises/{exercise_id}", response_model=BookExerciseResponse)
async def get_book_exercise(exercise_id: str, db: AsyncSession = Depends(get_db)):
    result = await ContentService(db).get_book_exercise(exercise_id)
    return BookExerciseResponse(exercise=result.data, source=result.source)


@router.get("/library", response_model=PromptLibraryResponse)
async def list_library_prompts(
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    tags: Optional[List[str]] = Query(None),
    search: Optional[str] = None,
    featured: bool = False,
):
    """Browse the prompt library. 'all' for category or difficulty disables that filter."""
    prompts = prompt_library.filter_library(
        category=category, difficulty=difficulty, tags=tags, search=search, featured=featured
    )
    return PromptLibraryResponse(
        prompts=prompts,
        total_count=len(prompt_library.PROMPT_LIBRARY),
        filtered_count=len(prompts),
    )


@router.get("/library/categories", response_model=List[str])
async def list_library_categories():
    return prompt_library.get_unique_categories()


@router.get("/library/tags", response_model=List[str])
async def list_library_tags():
    return prompt_library.get_unique_tags()


@router.get("/library/featured", response_model=List[PromptTemplateSchema])
async def list_featured_prompts():
    return prompt_library.get_featured_prompts()


@router.get("/library/saved", response_model=SavedPromptsResponse)
async def list_saved_prompts(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    List the ids of prompts the user saved to their library.

    Required permission: prompts:save
    """
    check_permission(user, "prompts:save")
    prompt_ids = await SavedPromptService(db, user.user_id).list_saved()
    return SavedPromptsResponse(prompt_ids=prompt_ids, count=len(prompt_ids))


@router.get("/library/{prompt_id}", response_model=PromptTemplateSchema)
async def get_library_prompt(prompt_id: str):
    prompt = prompt_library.get_prompt_by_id(prompt_id)
    if prompt is None:
        raise LibraryPromptNotFoundException(prompt_id)
    return prompt


@router.post("/library/{prompt_id}/save", response_model=SavedPromptsResponse)
async def save_library_prompt(
    prompt_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Save a library prompt to the user's personal library. Saving twice is a no-op.

    Required permission: prompts:save
    """
    check_permission(user, "prompts:save")
    prompt_ids = await SavedPromptService(db, user.user_id).save_prompt(prompt_id)
    return SavedPromptsResponse(prompt_ids=prompt_ids, count=len(prompt_ids))


@router.post("/seed", response_model=SeedReport)
async def seed_content(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Upsert the bundled chapters, book prompts and exercises into the database.

    Required permission: content:seed (admin role)
    """
    check_permission(user, "content:seed")
    return await seed_book_content(db)

"""Content Pydantic schemas"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from companion.content.exercise_fields import ExerciseFieldGroups
from companion.content.fallback import DataSource


class ChapterSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    number: int
    title: str
    part: int


class BookPromptSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    chapter: int
    category: str
    title: str
    prompt: str
    tags: List[str] = []
    pro_tip: Optional[str] = None
    is_from_book: bool = True
    sort_order: int = 0


class BookExerciseSchema(BaseModel):
    """Book exercise with validated field groups"""
    id: str
    chapter: int
    exercise_number: int
    title: str
    description: str
    type: str
    fields: ExerciseFieldGroups = {}
    sort_order: int = 0


class PromptTemplateSchema(BaseModel):
    id: str
    title: str
    prompt_template: str
    category: str
    difficulty: str  # Beginner | Intermediate | Advanced
    when_to_use: str
    why_it_works: str
    tags: List[str]
    rating: float
    times_used: int
    is_featured: bool
    author: str
    created_at: str


class ChapterListResponse(BaseModel):
    chapters: List[ChapterSchema]
    source: DataSource


class BookPromptListResponse(BaseModel):
    prompts: List[BookPromptSchema]
    count: int
    source: DataSource


class BookExerciseListResponse(BaseModel):
    exercises: List[BookExerciseSchema]
    count: int
    source: DataSource


class BookExerciseResponse(BaseModel):
    exercise: BookExerciseSchema
    source: DataSource


class PromptLibraryResponse(BaseModel):
    """Filtered library with the unfiltered size for "x of y" displays"""
    prompts: List[PromptTemplateSchema]
    total_count: int
    filtered_count: int


class SavedPromptsResponse(BaseModel):
    prompt_ids: List[str]
    count: int


class SeedReport(BaseModel):
    """Rows written and failed per content table"""
    chapters: int = 0
    book_prompts: int = 0
    book_exercises: int = 0
    failed: List[str] = []

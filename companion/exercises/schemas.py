"""Exercise response Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from companion.content.fallback import DataSource
from companion.content.schemas import BookExerciseSchema


class SubmitExerciseResponseRequest(BaseModel):
    """Answers keyed by field id"""
    response: Dict[str, Any]


class ExerciseResponseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    exercise_id: str
    response: Dict[str, Any]
    created_at: datetime
    updated_at: datetime


class MaturityLevelSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: str  # Beginner | Developing | Intermediate | Advanced
    description: str
    percentage: float


class ExerciseDetailResponse(BaseModel):
    exercise: BookExerciseSchema
    source: DataSource
    response: Optional[ExerciseResponseSchema] = None
    maturity: Optional[MaturityLevelSchema] = None


class SubmitExerciseResponseResult(BaseModel):
    response: ExerciseResponseSchema
    maturity: Optional[MaturityLevelSchema] = None


class ExerciseProgressResponse(BaseModel):
    """Position of an exercise in catalog order and overall completion"""
    current: int  # 1-based position
    total: int
    completed: int
    previous_exercise_id: Optional[str] = None
    next_exercise_id: Optional[str] = None


class ExerciseResponseListResponse(BaseModel):
    responses: List[ExerciseResponseSchema]
    count: int

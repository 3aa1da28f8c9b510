"""Profile export Pydantic schemas"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from companion.exercises.schemas import ExerciseResponseSchema
from companion.goals.schemas import GoalsResponse
from companion.ratings.schemas import RatingResponse


class ProfileSchema(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    join_date: Optional[datetime] = None


class ProfileExportResponse(BaseModel):
    """Everything the user has stored, for download"""
    profile: ProfileSchema
    exercises: List[ExerciseResponseSchema]
    ratings: List[RatingResponse]
    goals: GoalsResponse
    export_date: datetime

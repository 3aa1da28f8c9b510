"""Ratings and feedback Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from companion.ratings.scoring import FeedbackType


class RatedPromptType(str, Enum):
    """Prompt sources that take multi-dimension ratings"""
    BOOK = "book"
    USER = "user"


class PromptType(str, Enum):
    """Prompt sources that take quick ratings, feedback and stories"""
    BOOK = "book"
    USER = "user"
    LIBRARY = "library"


class RatingDimensions(BaseModel):
    """Per-dimension scores on a 1-5 scale"""
    model_config = ConfigDict(populate_by_name=True)

    effectiveness: int = Field(..., ge=1, le=5)
    clarity: int = Field(..., ge=1, le=5)
    time_value: int = Field(..., ge=1, le=5, alias="timeValue")


class SubmitRatingRequest(BaseModel):
    dimensions: RatingDimensions


class RatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    prompt_id: str
    prompt_type: str
    dimensions: RatingDimensions
    overall_score: float
    created_at: datetime
    updated_at: datetime


class RatingStats(BaseModel):
    """Aggregate statistics over all ratings of a prompt"""
    total_ratings: int
    average_overall: float
    average_effectiveness: float
    average_clarity: float
    average_time_value: float
    distribution: Dict[int, int]  # rounded overall score (1-5) -> count


class PromptRatingsResponse(BaseModel):
    ratings: List[RatingResponse]
    user_rating: Optional[RatingResponse] = None
    stats: RatingStats


class CreateFeedbackRequest(BaseModel):
    feedback_type: FeedbackType
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    is_public: bool = True


class FeedbackResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    prompt_id: str
    prompt_type: str
    feedback_type: FeedbackType
    title: str
    content: str
    is_public: bool
    helpful_count: int
    created_at: datetime


class FeedbackListResponse(BaseModel):
    """Public feedback, most helpful first, with counts per feedback type"""
    feedback: List[FeedbackResponse]
    count: int
    counts_by_type: Dict[str, int]


class QuickRatingRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    feedback: Optional[str] = Field(None, description="Optional comment, stored as public feedback")
    share_story: bool = Field(False, description="Also publish a 5-star comment as an anonymous success story")


class QuickRatingResponse(BaseModel):
    prompt_id: str
    prompt_type: PromptType
    rating: int
    feedback_id: Optional[UUID] = None
    success_story_id: Optional[UUID] = None
    points_awarded: int


class CreateSuccessStoryRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    output_content: Optional[str] = None
    time_saved: Optional[float] = Field(None, ge=0, description="Hours saved")
    is_anonymous: bool = False
    is_public: bool = True


class SuccessStoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: Optional[UUID]  # hidden for anonymous stories
    prompt_id: str
    prompt_type: str
    title: str
    description: str
    output_shared: bool
    output_content: Optional[str]
    time_saved: Optional[float]
    is_anonymous: bool
    is_public: bool
    helpful_count: int
    created_at: datetime


class SuccessStoryListResponse(BaseModel):
    stories: List[SuccessStoryResponse]
    count: int

"""Rewards Pydantic schemas"""
from uuid import UUID
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class LevelSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    key: str
    badge: str
    min_points: int
    max_points: Optional[int]
    perks: List[str]


class RewardEntryResponse(BaseModel):
    """Points ledger entry"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    action_type: str
    points_earned: int
    badge_earned: Optional[str]
    prompt_id: Optional[str]
    created_at: datetime


class RewardsSummaryResponse(BaseModel):
    total_points: int
    level: LevelSchema
    next_level: Optional[LevelSchema]
    progress_to_next_level: float  # 0-100
    points_to_next_level: int
    badges: List[str]
    recent_rewards: List[RewardEntryResponse]


class AchievementSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    icon: str


class UserMetricsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    completed_exercises: int
    total_exercises: int
    completion_percentage: int
    completed_chapters: int
    current_streak: int
    saved_prompts: int
    time_saved: float


class AchievementCheckResponse(BaseModel):
    """Achievements unlocked by this check"""
    unlocked: List[AchievementSchema]
    count: int

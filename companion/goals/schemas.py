"""Goals Pydantic schemas"""
from uuid import UUID
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class GoalPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class GoalEntry(BaseModel):
    """One goal inside the user's 90-day plan"""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    category: str = ""
    deadline: Optional[date] = None
    priority: GoalPriority = GoalPriority.MEDIUM
    metrics: str = Field("", description="How progress on the goal is measured")


class MilestoneRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    goal_id: str = Field(..., alias="goalId", description="Id of the goal entry the milestone belongs to")
    title: str = Field(..., min_length=1)
    target_date: Optional[date] = Field(None, alias="targetDate")
    completed: bool = False


class MilestoneResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    goal_id: str
    title: str
    target_date: Optional[date]
    completed: bool
    created_at: datetime


class SaveGoalsRequest(BaseModel):
    goals: List[GoalEntry]
    milestones: List[MilestoneRequest] = []
    vision: Optional[str] = None


class GoalsResponse(BaseModel):
    """The user's goals; empty with no id when none were saved yet"""
    id: Optional[UUID] = None
    goals: List[GoalEntry] = []
    vision: Optional[str] = None
    milestones: List[MilestoneResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

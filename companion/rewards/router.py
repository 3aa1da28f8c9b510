from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user
from companion.auth.models import CurrentUser
from companion.db.postgres import get_db
from companion.rewards.achievements import ACHIEVEMENTS
from companion.rewards.levels import LEVELS
from companion.rewards.schemas import (
    AchievementCheckResponse,
    AchievementSchema,
    LevelSchema,
    RewardsSummaryResponse,
    UserMetricsSchema,
)
from companion.rewards.service import RewardsService

router = APIRouter(
    prefix="/rewards",
    tags=["rewards"],
)


@router.get("/levels", response_model=List[LevelSchema])
async def list_levels():
    return [LevelSchema.model_validate(level) for level in LEVELS]


@router.get("/achievements", response_model=List[AchievementSchema])
async def list_achievements():
    return [AchievementSchema.model_validate(achievement) for achievement in ACHIEVEMENTS]


@router.get("/me", response_model=RewardsSummaryResponse)
async def get_my_rewards(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Get the user's points, level, progress to the next level, badges and recent rewards.

    Required permission: rewards:read
    """
    check_permission(user, "rewards:read")
    summary = await RewardsService(db, user.user_id).get_summary()
    return RewardsSummaryResponse.model_validate(summary, from_attributes=True)


@router.get("/me/metrics", response_model=UserMetricsSchema)
async def get_my_metrics(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Get the counts achievements are evaluated against.

    Required permission: rewards:read
    """
    check_permission(user, "rewards:read")
    metrics = await RewardsService(db, user.user_id).collect_metrics()
    return UserMetricsSchema.model_validate(metrics)


@router.post("/achievements/check", response_model=AchievementCheckResponse)
async def check_my_achievements(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Grant achievements the user has newly earned.

    Workflow:
    1. Collects live metrics (exercises, streak, saved prompts, time saved)
    2. Compares achievement conditions against badges already in the ledger
    3. Appends one ledger entry per newly unlocked achievement

    Required permission: rewards:read
    """
    check_permission(user, "rewards:read")
    unlocked = await RewardsService(db, user.user_id).evaluate_achievements()
    return AchievementCheckResponse(
        unlocked=[AchievementSchema.model_validate(a) for a in unlocked],
        count=len(unlocked),
    )

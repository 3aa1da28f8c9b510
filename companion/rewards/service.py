"""Rewards service layer for points, levels and achievements"""
import logging
from uuid import UUID
from typing import Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.config import get_settings
from companion.content.repository import SavedPromptRepository
from companion.content.service import ContentService
from companion.db.models import UserReward
from companion.exercises.repository import ExerciseResponseRepository
from companion.ratings.repository import SuccessStoryRepository
from companion.ratings.scoring import round_half_up
from companion.rewards.achievements import Achievement, UserMetrics, check_achievements, get_achievement_by_id
from companion.rewards.exceptions import RewardsUnavailableException
from companion.rewards.levels import get_level, get_next_level, points_to_next_level, progress_to_next_level
from companion.rewards.metrics import completion_percentage, compute_current_streak, count_completed_chapters
from companion.rewards.points import ACHIEVEMENT_ACTION, points_for_action
from companion.rewards.repository import RewardRepository
from companion.utils.timezone import local_date, local_today

logger = logging.getLogger(__name__)


class RewardsService:
    """Service layer for the caller's rewards"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        self.db = db
        self.user_id = user_id
        self.repository = RewardRepository(db, user_id)

    async def award_points(
        self,
        action_type: str,
        prompt_id: Optional[str] = None,
        badge: Optional[str] = None,
    ) -> Optional[UserReward]:
        """
        Append a ledger entry for an action.

        Best-effort: a failed write is logged and None is returned, so the
        action that earned the points still succeeds.
        """
        points = points_for_action(action_type)
        try:
            entry = await self.repository.add(action_type, points, badge=badge, prompt_id=prompt_id)
            logger.info(f"Awarded {points} points to user {self.user_id} for {action_type}")
            return entry
        except SQLAlchemyError as e:
            logger.error(f"Error awarding points for {action_type} to user {self.user_id}: {e}")
            await self.db.rollback()
            return None

    async def get_summary(self, recent_limit: int = 5) -> Dict:
        """Total points, current and next level, progress, badges and recent ledger entries."""
        try:
            total = await self.repository.total_points()
            badges = await self.repository.badges()
            recent = await self.repository.recent(recent_limit)
        except SQLAlchemyError as e:
            logger.error(f"Error loading rewards for user {self.user_id}: {e}")
            await self.db.rollback()
            raise RewardsUnavailableException("Failed to load rewards")

        level = get_level(total)
        return {
            "total_points": total,
            "level": level,
            "next_level": get_next_level(level),
            "progress_to_next_level": progress_to_next_level(total),
            "points_to_next_level": points_to_next_level(total),
            "badges": badges,
            "recent_rewards": recent,
        }

    async def collect_metrics(self) -> UserMetrics:
        """
        Gather the live counts achievements are evaluated against.

        Only responses to exercises in the current catalog count as completed.
        """
        responses = ExerciseResponseRepository(self.db, self.user_id)
        catalog = (await ContentService(self.db).get_book_exercises()).data
        try:
            answered_ids = await responses.list_exercise_ids()
            timestamps = await responses.list_activity_timestamps()
            time_saved = await SuccessStoryRepository(self.db, self.user_id).total_time_saved()
            saved_prompts = await SavedPromptRepository(self.db, self.user_id).count()
        except SQLAlchemyError as e:
            logger.error(f"Error collecting metrics for user {self.user_id}: {e}")
            await self.db.rollback()
            raise RewardsUnavailableException("Failed to load activity")

        completed_ids = set(answered_ids) & {e.id for e in catalog}

        tz_name = get_settings().display_timezone
        activity_days = set()
        for created_at, updated_at in timestamps:
            activity_days.add(local_date(created_at, tz_name))
            if updated_at:
                activity_days.add(local_date(updated_at, tz_name))

        return UserMetrics(
            completed_exercises=len(completed_ids),
            total_exercises=len(catalog),
            completion_percentage=completion_percentage(len(completed_ids), len(catalog)),
            completed_chapters=count_completed_chapters(
                completed_ids, [{"id": e.id, "chapter": e.chapter} for e in catalog]
            ),
            current_streak=compute_current_streak(activity_days, local_today(tz_name)),
            saved_prompts=saved_prompts,
            time_saved=round_half_up(time_saved, 1),
        )

    async def evaluate_achievements(self) -> List[Achievement]:
        """
        Grant every achievement whose condition now holds and that the user does not hold yet.

        Each unlock appends a zero-point ledger entry carrying the achievement id
        as its badge, so evaluating twice grants nothing new.
        """
        metrics = await self.collect_metrics()
        try:
            granted = await self.repository.badges()
        except SQLAlchemyError as e:
            logger.error(f"Error loading badges for user {self.user_id}: {e}")
            await self.db.rollback()
            raise RewardsUnavailableException("Failed to load achievements")

        unlocked = []
        for achievement_id in check_achievements(metrics, granted):
            entry = await self.award_points(ACHIEVEMENT_ACTION, badge=achievement_id)
            if entry is not None:
                unlocked.append(get_achievement_by_id(achievement_id))
        return unlocked

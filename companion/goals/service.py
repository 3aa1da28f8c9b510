"""Goals service layer for business logic"""
import logging
from uuid import UUID
from typing import Dict
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.goals.exceptions import GoalsUnavailableException
from companion.goals.repository import GoalsRepository
from companion.goals.schemas import SaveGoalsRequest

logger = logging.getLogger(__name__)


class GoalsService:
    """Service layer for 90-day goals"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        self.db = db
        self.user_id = user_id
        self.repository = GoalsRepository(db, user_id)

    async def get_goals(self) -> Dict:
        """The latest goals row with its milestones, or an empty result when none exists."""
        try:
            record = await self.repository.get_latest()
            if record is None:
                return {"goals": [], "milestones": []}
            milestones = await self.repository.list_milestones()
        except SQLAlchemyError as e:
            logger.error(f"Error loading goals for user {self.user_id}: {e}")
            await self.db.rollback()
            raise GoalsUnavailableException("Failed to load existing goals")

        return {
            "id": record.id,
            "goals": record.goals or [],
            "vision": record.vision,
            "milestones": milestones,
            "created_at": record.created_at,
            "updated_at": record.updated_at,
        }

    async def save_goals(self, request: SaveGoalsRequest) -> Dict:
        """
        Save the user's goals.

        Business rules:
        - One goals row per user: an existing row is updated, never duplicated
        - Milestones are replaced wholesale by the submitted list
        """
        goals = [goal.model_dump(mode="json") for goal in request.goals]
        milestones = [m.model_dump() for m in request.milestones]
        try:
            await self.repository.save(goals, request.vision, milestones)
        except SQLAlchemyError as e:
            logger.error(f"Error saving goals for user {self.user_id}: {e}")
            await self.db.rollback()
            raise GoalsUnavailableException("Failed to save goals")

        logger.info(f"Saved {len(goals)} goals and {len(milestones)} milestones for user {self.user_id}")
        return await self.get_goals()

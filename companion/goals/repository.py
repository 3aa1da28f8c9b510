"""Goals repository for database operations"""
from uuid import UUID
from typing import Dict, List, Optional
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from companion.db.models import GoalMilestone, UserGoals
from companion.db.repository import BaseRepository
from companion.utils.timezone import utcnow


class GoalsRepository(BaseRepository):
    """Repository for the caller's goals and milestones"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        super().__init__(db, user_id)

    async def get_latest(self) -> Optional[UserGoals]:
        await self._set_request_claims()
        stmt = (
            select(UserGoals)
            .where(UserGoals.user_id == self.user_id)
            .order_by(UserGoals.created_at.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_milestones(self) -> List[GoalMilestone]:
        await self._set_request_claims()
        stmt = (
            select(GoalMilestone)
            .where(GoalMilestone.user_id == self.user_id)
            .order_by(GoalMilestone.target_date, GoalMilestone.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def save(self, goals: List[Dict], vision: Optional[str], milestones: List[Dict]) -> UserGoals:
        """
        Store goals and replace all milestones in one transaction.

        Updates the user's existing goals row, or inserts one when there is none.
        """
        await self._set_request_claims()
        record = await self.get_latest()
        if record is None:
            record = UserGoals(user_id=self.user_id, goals=goals, vision=vision)
            self.db.add(record)
        else:
            record.goals = goals
            record.vision = vision
            record.updated_at = utcnow()

        await self.db.execute(delete(GoalMilestone).where(GoalMilestone.user_id == self.user_id))
        for milestone in milestones:
            self.db.add(GoalMilestone(user_id=self.user_id, **milestone))

        await self.db.commit()
        await self.db.refresh(record)
        return record

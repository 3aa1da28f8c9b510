"""Reward ledger repository for database operations"""
from uuid import UUID
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from companion.db.models import UserReward
from companion.db.repository import BaseRepository


class RewardRepository(BaseRepository):
    """Append-only access to the caller's points ledger"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        super().__init__(db, user_id)

    async def add(
        self,
        action_type: str,
        points: int,
        badge: Optional[str] = None,
        prompt_id: Optional[str] = None,
    ) -> UserReward:
        await self._set_request_claims()
        entry = UserReward(
            user_id=self.user_id,
            action_type=action_type,
            points_earned=points,
            badge_earned=badge,
            prompt_id=prompt_id,
        )
        self.db.add(entry)
        await self.db.commit()
        await self.db.refresh(entry)
        return entry

    async def total_points(self) -> int:
        await self._set_request_claims()
        stmt = select(func.coalesce(func.sum(UserReward.points_earned), 0)).where(
            UserReward.user_id == self.user_id
        )
        result = await self.db.execute(stmt)
        return int(result.scalar() or 0)

    async def recent(self, limit: int = 5) -> List[UserReward]:
        await self._set_request_claims()
        stmt = (
            select(UserReward)
            .where(UserReward.user_id == self.user_id)
            .order_by(UserReward.created_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def badges(self) -> List[str]:
        """Distinct badges earned, in the order they were first earned."""
        await self._set_request_claims()
        stmt = (
            select(UserReward.badge_earned, func.min(UserReward.created_at).label("earned_at"))
            .where(UserReward.user_id == self.user_id, UserReward.badge_earned.is_not(None))
            .group_by(UserReward.badge_earned)
            .order_by("earned_at")
        )
        result = await self.db.execute(stmt)
        return [badge for badge, _ in result.all()]

"""Ratings repository for database operations"""
from uuid import UUID
from typing import Dict, List, Optional
from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession
from companion.db.models import PromptFeedback, PromptRating, QuickRating, SuccessStory
from companion.db.repository import BaseRepository
from companion.utils.timezone import utcnow


class PromptRatingRepository(BaseRepository):
    """Repository for multi-dimension prompt ratings"""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        super().__init__(db, user_id)

    async def upsert(self, prompt_id: str, prompt_type: str, dimensions: Dict, overall_score: float) -> PromptRating:
        """Create the caller's rating for a prompt, or replace the one they already gave."""
        await self._set_request_claims()
        now = utcnow()
        await self._upsert(
            PromptRating,
            {
                "user_id": self.user_id,
                "prompt_id": prompt_id,
                "prompt_type": prompt_type,
                "dimensions": dimensions,
                "overall_score": overall_score,
                "created_at": now,
                "updated_at": now,
            },
            ["user_id", "prompt_id", "prompt_type"],
            ["dimensions", "overall_score", "updated_at"],
        )
        await self.db.commit()
        return await self.get_for_user(prompt_id, prompt_type)

    async def get_for_user(self, prompt_id: str, prompt_type: str) -> Optional[PromptRating]:
        await self._set_request_claims()
        stmt = select(PromptRating).where(
            PromptRating.user_id == self.user_id,
            PromptRating.prompt_id == prompt_id,
            PromptRating.prompt_type == prompt_type,
        ).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_prompt(self, prompt_id: str, prompt_type: str) -> List[PromptRating]:
        stmt = select(PromptRating).where(
            PromptRating.prompt_id == prompt_id,
            PromptRating.prompt_type == prompt_type,
        ).order_by(PromptRating.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_for_user(self) -> List[PromptRating]:
        await self._set_request_claims()
        stmt = select(PromptRating).where(PromptRating.user_id == self.user_id).order_by(PromptRating.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())


class FeedbackRepository(BaseRepository):
    """Repository for prompt feedback"""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        super().__init__(db, user_id)

    async def create(self, feedback: PromptFeedback) -> PromptFeedback:
        await self._set_request_claims()
        self.db.add(feedback)
        await self.db.commit()
        await self.db.refresh(feedback)
        return feedback

    async def get_by_id(self, feedback_id: UUID) -> Optional[PromptFeedback]:
        stmt = select(PromptFeedback).where(PromptFeedback.id == feedback_id).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_public(
        self,
        prompt_id: str,
        prompt_type: str,
        feedback_type: Optional[str] = None,
    ) -> List[PromptFeedback]:
        """
        List public feedback for a prompt, most helpful first, then newest first.

        Args:
            prompt_id: Prompt the feedback is about
            prompt_type: book | user | library
            feedback_type: Only this kind of feedback (optional)
        """
        stmt = select(PromptFeedback).where(
            PromptFeedback.prompt_id == prompt_id,
            PromptFeedback.prompt_type == prompt_type,
            PromptFeedback.is_public.is_(True),
        )
        if feedback_type:
            stmt = stmt.where(PromptFeedback.feedback_type == feedback_type)
        stmt = stmt.order_by(PromptFeedback.helpful_count.desc(), PromptFeedback.created_at.desc())

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_public_by_type(self, prompt_id: str, prompt_type: str) -> Dict[str, int]:
        stmt = (
            select(PromptFeedback.feedback_type, func.count())
            .where(
                PromptFeedback.prompt_id == prompt_id,
                PromptFeedback.prompt_type == prompt_type,
                PromptFeedback.is_public.is_(True),
            )
            .group_by(PromptFeedback.feedback_type)
        )
        result = await self.db.execute(stmt)
        return {feedback_type: count for feedback_type, count in result.all()}

    async def increment_helpful(self, feedback_id: UUID) -> Optional[PromptFeedback]:
        """Add one to the helpful counter in a single UPDATE. Returns None for an unknown id."""
        stmt = (
            update(PromptFeedback)
            .where(PromptFeedback.id == feedback_id)
            .values(helpful_count=PromptFeedback.helpful_count + 1)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        if result.rowcount == 0:
            return None
        return await self.get_by_id(feedback_id)


class QuickRatingRepository(BaseRepository):
    """Repository for one-click star ratings"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        super().__init__(db, user_id)

    async def upsert(self, prompt_id: str, prompt_type: str, rating: int) -> None:
        """Stage the caller's quick rating; the caller commits."""
        await self._set_request_claims()
        now = utcnow()
        await self._upsert(
            QuickRating,
            {
                "user_id": self.user_id,
                "prompt_id": prompt_id,
                "prompt_type": prompt_type,
                "rating": rating,
                "created_at": now,
                "updated_at": now,
            },
            ["user_id", "prompt_id", "prompt_type"],
            ["rating", "updated_at"],
        )


class SuccessStoryRepository(BaseRepository):
    """Repository for shared success stories"""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        super().__init__(db, user_id)

    async def create(self, story: SuccessStory) -> SuccessStory:
        await self._set_request_claims()
        self.db.add(story)
        await self.db.commit()
        await self.db.refresh(story)
        return story

    async def list_public(self, prompt_id: str, prompt_type: str) -> List[SuccessStory]:
        stmt = select(SuccessStory).where(
            SuccessStory.prompt_id == prompt_id,
            SuccessStory.prompt_type == prompt_type,
            SuccessStory.is_public.is_(True),
        ).order_by(SuccessStory.helpful_count.desc(), SuccessStory.created_at.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def total_time_saved(self) -> float:
        """Hours saved across all of the caller's stories."""
        await self._set_request_claims()
        stmt = select(func.coalesce(func.sum(SuccessStory.time_saved), 0)).where(
            SuccessStory.user_id == self.user_id
        )
        result = await self.db.execute(stmt)
        return float(result.scalar() or 0)

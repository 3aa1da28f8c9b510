"""Exercise response repository for database operations"""
from uuid import UUID
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from companion.db.models import ExerciseResponse
from companion.db.repository import BaseRepository
from companion.utils.timezone import utcnow


class ExerciseResponseRepository(BaseRepository):
    """Repository for the caller's exercise responses"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        super().__init__(db, user_id)

    async def upsert(self, exercise_id: str, response: Dict) -> ExerciseResponse:
        """Create the response for an exercise, or replace the stored one."""
        await self._set_request_claims()
        now = utcnow()
        await self._upsert(
            ExerciseResponse,
            {
                "user_id": self.user_id,
                "exercise_id": exercise_id,
                "response": response,
                "created_at": now,
                "updated_at": now,
            },
            ["user_id", "exercise_id"],
            ["response", "updated_at"],
        )
        await self.db.commit()
        return await self.get(exercise_id)

    async def get(self, exercise_id: str) -> Optional[ExerciseResponse]:
        await self._set_request_claims()
        stmt = select(ExerciseResponse).where(
            ExerciseResponse.user_id == self.user_id,
            ExerciseResponse.exercise_id == exercise_id,
        ).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_responses(self) -> List[ExerciseResponse]:
        await self._set_request_claims()
        stmt = select(ExerciseResponse).where(
            ExerciseResponse.user_id == self.user_id
        ).order_by(ExerciseResponse.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_exercise_ids(self) -> List[str]:
        await self._set_request_claims()
        stmt = select(ExerciseResponse.exercise_id).where(ExerciseResponse.user_id == self.user_id).distinct()
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def list_activity_timestamps(self) -> List[Tuple[datetime, datetime]]:
        """(created_at, updated_at) of every response, for streak computation."""
        await self._set_request_claims()
        stmt = select(ExerciseResponse.created_at, ExerciseResponse.updated_at).where(
            ExerciseResponse.user_id == self.user_id
        )
        result = await self.db.execute(stmt)
        return [tuple(row) for row in result.all()]

"""Exercise response service layer for business logic"""
import logging
from uuid import UUID
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.content.exceptions import ExerciseNotFoundException
from companion.content.service import ContentService
from companion.db.models import ExerciseResponse
from companion.exercises.exceptions import ExerciseResponseFailedException, ExerciseResponsesUnavailableException
from companion.exercises.maturity import MaturityLevel, calculate_maturity_level
from companion.exercises.repository import ExerciseResponseRepository

logger = logging.getLogger(__name__)

ASSESSMENT_TYPE = "assessment"


class ExerciseService:
    """Service layer for the caller's exercise responses"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        self.db = db
        self.user_id = user_id
        self.content = ContentService(db)
        self.repository = ExerciseResponseRepository(db, user_id)

    @staticmethod
    def maturity_for(exercise_type: str, response: Optional[ExerciseResponse]) -> Optional[MaturityLevel]:
        if response is None or exercise_type != ASSESSMENT_TYPE:
            return None
        return calculate_maturity_level(response.response)

    async def get_exercise_detail(self, exercise_id: str) -> Dict:
        """
        Get an exercise with the caller's response and, for assessments, the maturity level.

        A response that cannot be loaded is treated as absent.
        """
        result = await self.content.get_book_exercise(exercise_id)

        response = None
        try:
            response = await self.repository.get(exercise_id)
        except SQLAlchemyError as e:
            logger.warning(f"Could not load response to exercise {exercise_id}: {e}")
            await self.db.rollback()

        return {
            "exercise": result.data,
            "source": result.source,
            "response": response,
            "maturity": self.maturity_for(result.data.type, response),
        }

    async def submit_response(self, exercise_id: str, answers: Dict[str, Any]) -> Dict:
        """
        Create or replace the caller's response to an exercise.

        Raises:
            ExerciseNotFoundException: The exercise exists in neither tier
            ExerciseResponseFailedException: The response could not be stored
        """
        exercise = (await self.content.get_book_exercise(exercise_id)).data
        try:
            response = await self.repository.upsert(exercise_id, answers)
        except SQLAlchemyError as e:
            logger.error(f"Error saving response to exercise {exercise_id}: {e}")
            await self.db.rollback()
            raise ExerciseResponseFailedException()

        logger.info(f"Saved response to exercise {exercise_id} for user {self.user_id}")
        return {"response": response, "maturity": self.maturity_for(exercise.type, response)}

    async def get_progress(self, exercise_id: str) -> Dict:
        """Position of the exercise in catalog order, with neighbours and the completed count."""
        catalog = (await self.content.get_book_exercises()).data
        ids = [exercise.id for exercise in catalog]
        if exercise_id not in ids:
            raise ExerciseNotFoundException(exercise_id)
        index = ids.index(exercise_id)

        try:
            completed_ids = set(await self.repository.list_exercise_ids())
        except SQLAlchemyError as e:
            logger.warning(f"Could not load exercise responses for user {self.user_id}: {e}")
            await self.db.rollback()
            completed_ids = set()

        return {
            "current": index + 1,
            "total": len(ids),
            "completed": len(completed_ids & set(ids)),
            "previous_exercise_id": ids[index - 1] if index > 0 else None,
            "next_exercise_id": ids[index + 1] if index < len(ids) - 1 else None,
        }

    async def list_responses(self) -> List[ExerciseResponse]:
        try:
            return await self.repository.list_responses()
        except SQLAlchemyError as e:
            logger.error(f"Error loading exercise responses for user {self.user_id}: {e}")
            await self.db.rollback()
            raise ExerciseResponsesUnavailableException()

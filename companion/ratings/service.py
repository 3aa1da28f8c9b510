"""Ratings service layer for business logic"""
import logging
from uuid import UUID
from typing import Dict, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from companion.db.models import PromptFeedback, PromptRating, SuccessStory
from companion.ratings.exceptions import (
    FeedbackNotFoundException,
    RatingsUnavailableException,
    RatingsWriteFailedException,
)
from companion.ratings.repository import (
    FeedbackRepository,
    PromptRatingRepository,
    QuickRatingRepository,
    SuccessStoryRepository,
)
from companion.ratings.schemas import CreateSuccessStoryRequest, RatingDimensions
from companion.ratings.scoring import FeedbackType, compute_overall_score, compute_rating_stats
from companion.rewards.points import points_for_action
from companion.rewards.service import RewardsService

logger = logging.getLogger(__name__)


def quick_feedback_type(rating: int) -> FeedbackType:
    if rating <= 2:
        return FeedbackType.ISSUE
    if rating == 5:
        return FeedbackType.SUCCESS_STORY
    return FeedbackType.SUGGESTION


def quick_feedback_title(rating: int) -> str:
    if rating == 5:
        return "Great experience!"
    if rating <= 2:
        return "Had some issues"
    return "Feedback"


class RatingService:
    """Service layer for multi-dimension prompt ratings"""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        self.db = db
        self.user_id = user_id
        self.repository = PromptRatingRepository(db, user_id)

    async def submit_rating(self, prompt_id: str, prompt_type: str, dimensions: RatingDimensions) -> PromptRating:
        """
        Rate a prompt on effectiveness, clarity and time value.

        Business rules:
        - Overall score is the weighted sum of the dimensions, rounded to 2 decimals
        - One rating per user, prompt and prompt type; resubmitting replaces it
        """
        scores = dimensions.model_dump(by_alias=True)
        overall_score = compute_overall_score(scores)
        try:
            return await self.repository.upsert(prompt_id, prompt_type, scores, overall_score)
        except SQLAlchemyError as e:
            logger.error(f"Error submitting rating for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsWriteFailedException("Failed to submit rating")

    async def get_prompt_ratings(self, prompt_id: str, prompt_type: str) -> Dict:
        """All ratings of a prompt, the caller's own rating (if signed in) and aggregate stats."""
        try:
            ratings = await self.repository.list_for_prompt(prompt_id, prompt_type)
        except SQLAlchemyError as e:
            logger.error(f"Error loading ratings for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsUnavailableException()

        user_rating = None
        if self.user_id is not None:
            user_rating = next((r for r in ratings if r.user_id == self.user_id), None)

        return {
            "ratings": ratings,
            "user_rating": user_rating,
            "stats": compute_rating_stats(ratings),
        }


class FeedbackService:
    """Service layer for prompt feedback"""

    def __init__(self, db: AsyncSession, user_id: Optional[UUID] = None):
        self.db = db
        self.user_id = user_id
        self.repository = FeedbackRepository(db, user_id)

    async def submit_feedback(
        self,
        prompt_id: str,
        prompt_type: str,
        feedback_type: FeedbackType,
        title: str,
        content: str,
        is_public: bool = True,
    ) -> PromptFeedback:
        feedback = PromptFeedback(
            user_id=self.user_id,
            prompt_id=prompt_id,
            prompt_type=prompt_type,
            feedback_type=feedback_type.value,
            title=title,
            content=content,
            is_public=is_public,
            helpful_count=0,
        )
        try:
            return await self.repository.create(feedback)
        except SQLAlchemyError as e:
            logger.error(f"Error submitting feedback for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsWriteFailedException("Failed to submit feedback")

    async def list_feedback(
        self,
        prompt_id: str,
        prompt_type: str,
        feedback_type: Optional[FeedbackType] = None,
    ) -> Dict:
        """Public feedback for a prompt, most helpful first, with counts per feedback type."""
        try:
            feedback = await self.repository.list_public(
                prompt_id, prompt_type, feedback_type.value if feedback_type else None
            )
            counts = await self.repository.count_public_by_type(prompt_id, prompt_type)
        except SQLAlchemyError as e:
            logger.error(f"Error loading feedback for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsUnavailableException()

        return {
            "feedback": feedback,
            "count": len(feedback),
            "counts_by_type": {t.value: counts.get(t.value, 0) for t in FeedbackType},
        }

    async def mark_helpful(self, feedback_id: UUID) -> PromptFeedback:
        try:
            feedback = await self.repository.increment_helpful(feedback_id)
        except SQLAlchemyError as e:
            logger.error(f"Error marking feedback {feedback_id} as helpful: {e}")
            await self.db.rollback()
            raise RatingsWriteFailedException("Failed to mark feedback as helpful")

        if feedback is None:
            raise FeedbackNotFoundException(feedback_id)
        return feedback


class QuickRatingService:
    """Service layer for one-click ratings and success stories"""

    def __init__(self, db: AsyncSession, user_id: UUID):
        self.db = db
        self.user_id = user_id
        self.quick_ratings = QuickRatingRepository(db, user_id)
        self.feedback = FeedbackRepository(db, user_id)
        self.stories = SuccessStoryRepository(db, user_id)
        self.rewards = RewardsService(db, user_id)

    async def submit_quick_rating(
        self,
        prompt_id: str,
        prompt_type: str,
        rating: int,
        feedback: Optional[str] = None,
        share_story: bool = False,
    ) -> Dict:
        """
        Store a 1-5 star rating, with optional public feedback and success story.

        Workflow:
        1. Upserts the quick rating for (user, prompt, prompt type)
        2. Stores non-blank feedback text as public feedback typed by the rating
        3. Awards first_rating points (best-effort)
        4. Publishes an anonymous success story for shared 5-star feedback
        """
        feedback_entry = None
        try:
            await self.quick_ratings.upsert(prompt_id, prompt_type, rating)
            if feedback and feedback.strip():
                feedback_entry = PromptFeedback(
                    user_id=self.user_id,
                    prompt_id=prompt_id,
                    prompt_type=prompt_type,
                    feedback_type=quick_feedback_type(rating).value,
                    title=quick_feedback_title(rating),
                    content=feedback,
                    is_public=True,
                    helpful_count=0,
                )
                self.db.add(feedback_entry)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error submitting quick rating for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsWriteFailedException("Failed to submit rating")

        # Read before awarding points; a failed award rolls back and expires the session
        feedback_id = feedback_entry.id if feedback_entry else None
        reward = await self.rewards.award_points("first_rating", prompt_id=prompt_id)

        story = None
        if share_story and rating == 5 and feedback and feedback.strip():
            story = await self._create_story(
                prompt_id,
                prompt_type,
                SuccessStory(
                    title="Quick Success Story",
                    description=feedback,
                    output_shared=False,
                    is_anonymous=True,
                    is_public=True,
                ),
            )

        return {
            "prompt_id": prompt_id,
            "prompt_type": prompt_type,
            "rating": rating,
            "feedback_id": feedback_id,
            "success_story_id": story.id if story else None,
            "points_awarded": points_for_action("first_rating") if reward else 0,
        }

    async def submit_success_story(
        self,
        prompt_id: str,
        prompt_type: str,
        request: CreateSuccessStoryRequest,
    ) -> SuccessStory:
        """Share a success story and award success_story points."""
        story = await self._create_story(
            prompt_id,
            prompt_type,
            SuccessStory(
                title=request.title,
                description=request.description,
                output_shared=bool(request.output_content),
                output_content=request.output_content,
                time_saved=request.time_saved,
                is_anonymous=request.is_anonymous,
                is_public=request.is_public,
            ),
        )
        if await self.rewards.award_points("success_story", prompt_id=prompt_id) is None:
            await self.db.refresh(story)
        return story

    async def list_success_stories(self, prompt_id: str, prompt_type: str):
        try:
            return await self.stories.list_public(prompt_id, prompt_type)
        except SQLAlchemyError as e:
            logger.error(f"Error loading success stories for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsUnavailableException()

    async def _create_story(self, prompt_id: str, prompt_type: str, story: SuccessStory) -> SuccessStory:
        story.user_id = self.user_id
        story.prompt_id = prompt_id
        story.prompt_type = prompt_type
        story.helpful_count = 0
        try:
            return await self.stories.create(story)
        except SQLAlchemyError as e:
            logger.error(f"Error sharing success story for {prompt_type} prompt {prompt_id}: {e}")
            await self.db.rollback()
            raise RatingsWriteFailedException("Failed to share success story")

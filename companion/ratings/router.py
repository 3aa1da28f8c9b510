from uuid import UUID
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user, get_optional_user
from companion.auth.models import CurrentUser
from companion.db.postgres import get_db
from companion.ratings.schemas import (
    CreateFeedbackRequest,
    CreateSuccessStoryRequest,
    FeedbackListResponse,
    FeedbackResponse,
    PromptRatingsResponse,
    PromptType,
    QuickRatingRequest,
    QuickRatingResponse,
    RatedPromptType,
    RatingResponse,
    SubmitRatingRequest,
    SuccessStoryListResponse,
    SuccessStoryResponse,
)
from companion.ratings.scoring import FeedbackType
from companion.ratings.service import FeedbackService, QuickRatingService, RatingService

router = APIRouter(
    prefix="/ratings",
    tags=["ratings"],
)


def _story_response(story) -> SuccessStoryResponse:
    response = SuccessStoryResponse.model_validate(story)
    if story.is_anonymous:
        response.user_id = None
    return response


@router.post("/feedback/{feedback_id}/helpful", response_model=FeedbackResponse)
async def mark_feedback_helpful(
    feedback_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Increment the helpful counter of a feedback entry.

    Required permission: feedback:write
    """
    check_permission(user, "feedback:write")
    return await FeedbackService(db, user.user_id).mark_helpful(feedback_id)


@router.post("/quick/{prompt_type}/{prompt_id}", response_model=QuickRatingResponse)
async def submit_quick_rating(
    prompt_type: PromptType,
    prompt_id: str,
    request: QuickRatingRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Rate a prompt with 1-5 stars.

    Workflow:
    1. Stores the rating, replacing the user's previous quick rating
    2. Non-blank feedback becomes public feedback (ISSUE for 1-2, SUGGESTION for 3-4, SUCCESS_STORY for 5)
    3. Awards first_rating points
    4. With share_story, 5-star feedback is also published as an anonymous success story

    Required permission: ratings:write
    """
    check_permission(user, "ratings:write")
    result = await QuickRatingService(db, user.user_id).submit_quick_rating(
        prompt_id=prompt_id,
        prompt_type=prompt_type.value,
        rating=request.rating,
        feedback=request.feedback,
        share_story=request.share_story,
    )
    return QuickRatingResponse(**result)


@router.post(
    "/stories/{prompt_type}/{prompt_id}",
    response_model=SuccessStoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_success_story(
    prompt_type: PromptType,
    prompt_id: str,
    request: CreateSuccessStoryRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Share how a prompt helped. Awards success_story points.

    Required permission: feedback:write
    """
    check_permission(user, "feedback:write")
    story = await QuickRatingService(db, user.user_id).submit_success_story(prompt_id, prompt_type.value, request)
    return _story_response(story)


@router.get("/stories/{prompt_type}/{prompt_id}", response_model=SuccessStoryListResponse)
async def list_success_stories(
    prompt_type: PromptType,
    prompt_id: str,
    db: AsyncSession = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_optional_user),
):
    service = QuickRatingService(db, user.user_id if user else None)
    stories = await service.list_success_stories(prompt_id, prompt_type.value)
    return SuccessStoryListResponse(stories=[_story_response(s) for s in stories], count=len(stories))


@router.get("/{prompt_type}/{prompt_id}", response_model=PromptRatingsResponse)
async def get_prompt_ratings(
    prompt_type: RatedPromptType,
    prompt_id: str,
    db: AsyncSession = Depends(get_db),
    user: Optional[CurrentUser] = Depends(get_optional_user),
):
    """
    Get all ratings of a prompt with aggregate statistics.

    Signed-in callers also get their own rating in `user_rating`.
    """
    service = RatingService(db, user.user_id if user else None)
    return await service.get_prompt_ratings(prompt_id, prompt_type.value)


@router.put("/{prompt_type}/{prompt_id}", response_model=RatingResponse)
async def submit_rating(
    prompt_type: RatedPromptType,
    prompt_id: str,
    request: SubmitRatingRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Rate a prompt on effectiveness, clarity and time value.

    A second submission from the same user replaces the first.

    Required permission: ratings:write
    """
    check_permission(user, "ratings:write")
    return await RatingService(db, user.user_id).submit_rating(prompt_id, prompt_type.value, request.dimensions)


@router.get("/{prompt_type}/{prompt_id}/feedback", response_model=FeedbackListResponse)
async def list_feedback(
    prompt_type: PromptType,
    prompt_id: str,
    feedback_type: Optional[FeedbackType] = None,
    db: AsyncSession = Depends(get_db),
):
    """List public feedback for a prompt, most helpful first, then newest first."""
    return await FeedbackService(db).list_feedback(prompt_id, prompt_type.value, feedback_type)


@router.post(
    "/{prompt_type}/{prompt_id}/feedback",
    response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_feedback(
    prompt_type: PromptType,
    prompt_id: str,
    request: CreateFeedbackRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Leave feedback on a prompt.

    Required permission: feedback:write
    """
    check_permission(user, "feedback:write")
    return await FeedbackService(db, user.user_id).submit_feedback(
        prompt_id=prompt_id,
        prompt_type=prompt_type.value,
        feedback_type=request.feedback_type,
        title=request.title,
        content=request.content,
        is_public=request.is_public,
    )

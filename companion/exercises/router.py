from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user
from companion.auth.models import CurrentUser
from companion.db.postgres import get_db
from companion.exercises.schemas import (
    ExerciseDetailResponse,
    ExerciseProgressResponse,
    ExerciseResponseListResponse,
    SubmitExerciseResponseRequest,
    SubmitExerciseResponseResult,
)
from companion.exercises.service import ExerciseService

router = APIRouter(
    prefix="/exercises",
    tags=["exercises"],
)


@router.get("/responses/me", response_model=ExerciseResponseListResponse)
async def list_my_responses(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    List all of the user's exercise responses.

    Required permission: exercises:read
    """
    check_permission(user, "exercises:read")
    responses = await ExerciseService(db, user.user_id).list_responses()
    return ExerciseResponseListResponse(responses=responses, count=len(responses))


@router.get("/{exercise_id}", response_model=ExerciseDetailResponse)
async def get_exercise(
    exercise_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Get an exercise with the user's saved response.

    Assessment exercises also report the readiness maturity level of the response.

    Required permission: exercises:read
    """
    check_permission(user, "exercises:read")
    return await ExerciseService(db, user.user_id).get_exercise_detail(exercise_id)


@router.put("/{exercise_id}/response", response_model=SubmitExerciseResponseResult)
async def submit_exercise_response(
    exercise_id: str,
    request: SubmitExerciseResponseRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Save the user's answers to an exercise, replacing any earlier response.

    Required permission: exercises:write
    """
    check_permission(user, "exercises:write")
    return await ExerciseService(db, user.user_id).submit_response(exercise_id, request.response)


@router.get("/{exercise_id}/progress", response_model=ExerciseProgressResponse)
async def get_exercise_progress(
    exercise_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Required permission: exercises:read
    """
    check_permission(user, "exercises:read")
    return await ExerciseService(db, user.user_id).get_progress(exercise_id)

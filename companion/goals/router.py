from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from companion.auth.middleware import check_permission, get_current_user
from companion.auth.models import CurrentUser
from companion.db.postgres import get_db
from companion.goals.schemas import GoalsResponse, SaveGoalsRequest
from companion.goals.service import GoalsService

router = APIRouter(
    prefix="/goals",
    tags=["goals"],
)


@router.get("/me", response_model=GoalsResponse)
async def get_my_goals(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Get the user's goals, vision and milestones.

    Required permission: goals:read
    """
    check_permission(user, "goals:read")
    return await GoalsService(db, user.user_id).get_goals()


@router.put("/me", response_model=GoalsResponse)
async def save_my_goals(
    request: SaveGoalsRequest,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """
    Save the user's goals and vision, replacing all milestones.

    Required permission: goals:write
    """
    check_permission(user, "goals:write")
    return await GoalsService(db, user.user_id).save_goals(request)

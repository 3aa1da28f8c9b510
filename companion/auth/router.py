"""Session endpoints: current user and sign-out"""
import logging
import requests
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials

from companion.auth.client import AuthClient
from companion.auth.middleware import get_current_user, security
from companion.auth.models import CurrentUser
from companion.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


def get_auth_client() -> AuthClient:
    settings = get_settings()
    if not settings.backend_configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication backend is not configured",
        )
    return AuthClient(settings.supabase_url, settings.supabase_anon_key)


@router.get("/me", response_model=CurrentUser)
async def read_current_user(user: CurrentUser = Depends(get_current_user)):
    """Return the signed-in user."""
    return user


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    user: CurrentUser = Depends(get_current_user),
    client: AuthClient = Depends(get_auth_client),
):
    """Revoke the caller's session with the auth service."""
    try:
        client.sign_out(credentials.credentials)
    except requests.RequestException as e:
        logger.error(f"Sign-out failed for user {user.user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Failed to sign out",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

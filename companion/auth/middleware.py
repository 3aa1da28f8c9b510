"""Authentication Middleware"""
import logging
from functools import lru_cache
from typing import Optional
from jose import JWTError
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from companion.auth.models import CurrentUser
from companion.auth.jwt_verifier import JWTVerifier
from companion.auth.permissions_manager import PermissionsManager
from companion.config import get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)
permissions_manager = PermissionsManager()


@lru_cache
def get_jwt_verifier() -> JWTVerifier:
    """Build the verifier from configuration, or fail with 503 when the backend is not configured."""
    settings = get_settings()
    if not settings.backend_configured:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Authentication backend is not configured",
        )
    return JWTVerifier(
        supabase_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        jwt_secret=settings.supabase_jwt_secret,
        audience=settings.jwt_audience,
    )


def user_from_claims(payload: dict) -> CurrentUser:
    """
    Build the current user from verified token claims.

    Expected JWT claims:
    - sub: user_id
    - role: database role (usually 'authenticated')
    - app_metadata.roles: extra application roles (e.g. 'admin')
    - user_metadata.name: display name
    """
    roles = []
    if payload.get("role"):
        roles.append(payload["role"])
    app_metadata = payload.get("app_metadata") or {}
    roles.extend(role for role in app_metadata.get("roles", []) if role not in roles)

    user_metadata = payload.get("user_metadata") or {}

    return CurrentUser(
        sub=payload["sub"],
        email=payload.get("email"),
        name=user_metadata.get("name"),
        roles=roles,
        permissions=permissions_manager.get_permissions_for_roles(roles),
        iat=payload.get("iat"),
        exp=payload.get("exp"),
    )


def _authenticate(token: str) -> CurrentUser:
    verifier = get_jwt_verifier()
    try:
        payload = verifier.verify_and_decode(token)
        return user_from_claims(payload)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}"
        )
    except KeyError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: missing claim {e}"
        )
    except Exception as e:
        logger.error(f"Token verification failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Token verification failed: {str(e)}"
        )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> CurrentUser:
    """Verify the bearer token and return the signed-in user."""
    return _authenticate(credentials.credentials)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[CurrentUser]:
    """Like get_current_user, but anonymous callers get None instead of 403."""
    if credentials is None:
        return None
    return _authenticate(credentials.credentials)


def check_permission(user: CurrentUser, required_permission: str):
    """
    Check if user has required permission.

    Args:
        user: Authenticated user with resolved permissions
        required_permission: Permission string to check

    Raises:
        HTTPException: If user lacks required permission
    """
    if required_permission not in user.permissions:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Missing required permission: {required_permission}"
        )

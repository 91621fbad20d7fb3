"""
JWT Authentication middleware.

FastAPI dependencies that gate protected routes. Failures are raised as
AuthenticationError subclasses and rendered as 401 responses by the
handlers in api.error_handlers.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError, UserNotFoundError
from modules.auth.interfaces import IAuthService
from modules.auth.models import UserProfile
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor; returns None instead of raising when absent
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a valid bearer token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    return await auth.validate_token(credentials.credentials)


async def get_verified_user(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> UserProfile:
    """
    Dependency that requires a valid token whose subject still exists.

    Stricter than get_current_user: a correctly signed token for an
    identity that has since been removed is rejected.
    """
    profile = await auth.get_user_by_id(user.id)
    if profile is None:
        raise UserNotFoundError(user.id)
    return profile

"""
Current-user endpoint.
"""

from fastapi import APIRouter, Depends

from modules.auth.models import UserProfile
from ..middleware.auth import get_verified_user

router = APIRouter()


@router.get("/user", response_model=UserProfile)
async def get_current_user_profile(
    user: UserProfile = Depends(get_verified_user),
) -> UserProfile:
    """
    Get the identity behind the presented token.

    Unlike the product routes, this also requires the identity to still
    exist in the identity store.
    """
    return user

"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the identity backend.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import TokenResponse, UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def authenticate(self, email: str, password: str) -> TokenResponse:
        """
        Verify credentials and issue a bearer token.

        Args:
            email: Identity email
            password: Plain-text password to check against the stored hash

        Returns:
            TokenResponse with a signed, time-bounded token

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated caller.

        Raises:
            MissingTokenError, MalformedTokenError, InvalidSignatureError,
            ExpiredTokenError: depending on why the token was rejected
        """
        ...

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get an identity's public profile by ID, None if absent."""
        ...

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """Get an identity's public profile by email, None if absent."""
        ...

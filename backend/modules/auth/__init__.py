"""
Authentication module.

Handles login, JWT issuing/validation and identity lookups.

Public API:
- IAuthService: Interface for auth operations
- UserProfile: Public identity profile
- TokenResponse, LoginRequest: Login payloads
- Auth exceptions: InvalidCredentialsError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload, LoginRequest, TokenResponse, UserProfile
from .exceptions import (
    InvalidCredentialsError,
    MissingTokenError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError,
    AuthNotConfiguredError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    "LoginRequest",
    "TokenResponse",
    "UserProfile",
    # Exceptions
    "InvalidCredentialsError",
    "MissingTokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "AuthNotConfiguredError",
    "UserNotFoundError",
]

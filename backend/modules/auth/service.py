"""
Authentication service implementation.

Checks email/password logins against bcrypt hashes in the identity store,
issues HS256 JWTs, and validates them on protected requests.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
from starlette.concurrency import run_in_threadpool

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import JWTPayload, TokenResponse, UserProfile, UserRecord
from .repository import UserRepository
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingTokenError,
)

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "exp", "iat"]

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


@lru_cache
def _dummy_hash() -> str:
    """Hash checked against when the email is unknown, so both paths cost the same."""
    return hash_password("not-a-real-password")


def _password_bytes(password: str) -> bytes:
    """
    Encode a password the way every bcrypt call here sees it.

    Input past 72 bytes is cut off, which is what bcrypt did implicitly
    before 5.0 (5.0 raises instead), so existing hashes keep verifying.
    """
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a plain-text password with bcrypt."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plain-text password against a bcrypt hash.

    bcrypt.checkpw compares in constant time. A corrupt stored hash counts
    as a mismatch.
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Tokens are stateless: nothing is persisted on login, and a token stays
    valid until its ``exp`` claim passes.
    """

    def __init__(
        self,
        users: Optional[UserRepository] = None,
        settings: Optional[Settings] = None,
    ):
        self._users = users
        self._settings = settings or get_settings()

    @property
    def users(self) -> UserRepository:
        """Identity repository, built from the shared client on first use."""
        if self._users is None:
            from shared.database import get_supabase_client
            self._users = UserRepository(get_supabase_client())
        return self._users

    async def authenticate(self, email: str, password: str) -> TokenResponse:
        """Verify credentials and issue a bearer token."""
        user = self.users.get_by_email(email)
        stored_hash = user.password if user is not None else await run_in_threadpool(_dummy_hash)

        # bcrypt is CPU-bound; keep it off the event loop
        matches = await run_in_threadpool(verify_password, password, stored_hash)

        if user is None or not matches:
            logger.warning(
                "Failed login attempt",
                extra={"user_id": user.id if user is not None else None},
            )
            raise InvalidCredentialsError()

        logger.info("User logged in", extra={"user_id": user.id})
        return TokenResponse(token=self.issue_token(user))

    def issue_token(self, user: UserRecord, now: Optional[datetime] = None) -> str:
        """
        Sign a token for an identity.

        Args:
            user: The identity the token is issued to
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        secret = self._require_secret()
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(minutes=self._settings.jwt_ttl_minutes)

        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self._settings.jwt_algorithm)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Signature is checked before expiry, so a forged token that is also
        expired is reported as a signature failure.
        """
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            claims = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            logger.debug("Rejected token with bad signature")
            raise InvalidSignatureError()
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected malformed token: {e}")
            raise MalformedTokenError()
        except ValueError:
            # Decoded, but the claims don't fit JWTPayload
            raise MalformedTokenError()

        return AuthenticatedUser(
            id=claims.sub,
            email=claims.email or "",
            issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
        )

    async def get_user_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get an identity's public profile by ID."""
        user = self.users.get_by_id(user_id)
        return user.to_profile() if user else None

    async def get_user_by_email(self, email: str) -> Optional[UserProfile]:
        """Get an identity's public profile by email."""
        user = self.users.get_by_email(email)
        return user.to_profile() if user else None

    def _require_secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()
        return self._settings.jwt_secret

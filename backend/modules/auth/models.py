"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """Decoded claims of a bearer token issued by this API."""

    sub: str = Field(..., description="Subject (identity ID)")
    email: Optional[str] = Field(None, description="Identity email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class UserRecord(BaseModel):
    """
    Stored identity row, including the password hash.

    Never returned from the API; use UserProfile for that.
    """

    id: str
    name: Optional[str] = None
    email: str
    password: str = Field(..., repr=False, description="bcrypt hash")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_profile(self) -> "UserProfile":
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UserProfile(BaseModel):
    """Public view of a stored identity."""

    id: str = Field(..., description="Identity ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="Email address")
    created_at: Optional[datetime] = Field(None, description="Account creation time")
    updated_at: Optional[datetime] = Field(None, description="Last update time")


class LoginRequest(BaseModel):
    """Credentials posted to /login."""

    model_config = {"extra": "ignore"}

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Successful login response."""

    token: str = Field(..., description="Signed bearer token")

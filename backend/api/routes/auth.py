"""
Login and token-protected utility endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.interfaces import IAuthService
from modules.auth.models import LoginRequest, TokenResponse
from shared.validation import validate_payload

from ..dependencies import get_auth_service
from ..middleware.auth import get_current_user
from ..responses import validation_error_response

router = APIRouter()


class MessageResponse(BaseModel):
    """Static confirmation message."""

    message: str


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: Any = Body(None),
    auth: IAuthService = Depends(get_auth_service),
):
    """
    Exchange email and password for a bearer token.

    Bad credentials are reported as a 422 field error on ``email`` rather
    than a 401, matching the behaviour existing clients rely on.
    """
    result = validate_payload(LoginRequest, payload)
    if not result.ok:
        return validation_error_response(result.errors)

    try:
        return await auth.authenticate(result.data.email, result.data.password)
    except InvalidCredentialsError as e:
        return validation_error_response({"email": [e.message]})


@router.get(
    "/secure-data",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_user)],
)
async def secure_data() -> MessageResponse:
    """Confirms the caller presented a valid token."""
    return MessageResponse(message="This route is protected by JWT")

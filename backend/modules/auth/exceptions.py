"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers, which turn them into 401 responses. Login failures are
the exception: the login route reports them as field errors (422).
"""

from shared.exceptions import AuthenticationError


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when an email/password pair does not match a stored identity.

    Unknown emails and wrong passwords share this error and its message.
    """

    def __init__(self, message: str = "The provided credentials are incorrect."):
        super().__init__(message, code="INVALID_CREDENTIALS")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Token not provided"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(AuthenticationError):
    """Raised when a bearer token cannot be parsed as a JWT."""

    def __init__(self, message: str = "Token could not be parsed"):
        super().__init__(message, code="MALFORMED_TOKEN")


class InvalidSignatureError(AuthenticationError):
    """Raised when a JWT signature does not match the server secret."""

    def __init__(self, message: str = "Token signature could not be verified"):
        super().__init__(message, code="INVALID_SIGNATURE")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret to sign or verify with."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")


class UserNotFoundError(AuthenticationError):
    """Raised when the token subject doesn't exist in the identity store."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )

import pytest
from pydantic import ValidationError

from modules.auth.models import JWTPayload, LoginRequest, UserRecord
from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    def test_user_is_immutable(self):
        """AuthenticatedUser should be immutable."""
        user = AuthenticatedUser(id="1", email="admin@example.com")
        with pytest.raises(ValidationError):
            user.id = "2"


class TestUserRecord:
    def test_profile_drops_password(self):
        record = UserRecord(id="1", name="Admin", email="admin@example.com", password="$2b$hash")
        profile = record.to_profile()

        assert profile.id == "1"
        assert profile.name == "Admin"
        assert "password" not in profile.model_dump()

    def test_password_hidden_from_repr(self):
        record = UserRecord(id="1", email="admin@example.com", password="$2b$secret-hash")
        assert "secret-hash" not in repr(record)


class TestJWTPayload:
    def test_requires_subject(self):
        with pytest.raises(ValidationError):
            JWTPayload(exp=2, iat=1)

    def test_email_optional(self):
        payload = JWTPayload(sub="1", exp=2, iat=1)
        assert payload.email is None


class TestLoginRequest:
    def test_rejects_empty_values(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="", password="")

    def test_ignores_extra_fields(self):
        request = LoginRequest(email="admin@example.com", password="pw", remember=True)
        assert not hasattr(request, "remember")

"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_product_service, reset_container
from modules.auth.models import UserRecord
from modules.auth.service import AuthService, hash_password
from modules.products.service import ProductService
from shared.config import Settings

from tests.fakes import InMemoryProductRepository, InMemoryUserRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

ADMIN_ID = "1"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "password123"


def create_test_token(
    user_id: str = ADMIN_ID,
    email: str = ADMIN_EMAIL,
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: Identity ID to use as the subject
        email: Email to include in the token
        expired: If True, creates a token that expired an hour ago
        secret: Signing secret, override to forge a bad signature

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    if expired:
        iat = now - timedelta(hours=2)
        exp = now - timedelta(hours=1)
    else:
        iat = now
        exp = now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "iat": int(iat.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture(scope="session")
def admin_password_hash() -> str:
    """bcrypt hash of ADMIN_PASSWORD, computed once per session."""
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture
def settings() -> Settings:
    """Settings with a known JWT secret and no .env file."""
    return Settings(_env_file=None, jwt_secret=TEST_JWT_SECRET, jwt_ttl_minutes=60)


@pytest.fixture
def user_repository(admin_password_hash: str) -> InMemoryUserRepository:
    """Identity store seeded with the admin user."""
    return InMemoryUserRepository([
        UserRecord(
            id=ADMIN_ID,
            name="Admin User",
            email=ADMIN_EMAIL,
            password=admin_password_hash,
        )
    ])


@pytest.fixture
def auth_service(user_repository, settings) -> AuthService:
    return AuthService(users=user_repository, settings=settings)


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def product_service(product_repository) -> ProductService:
    return ProductService(repository=product_repository)


@pytest.fixture
def app(auth_service, product_service):
    """Fresh app wired to the in-memory services."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_product_service] = lambda: product_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for the seeded admin."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}

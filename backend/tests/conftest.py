"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_user_service,
    get_tweet_service,
)
from shared.authorization import OwnershipGuard
from shared.config import Settings
from modules.auth.credentials import CredentialStore
from modules.auth.tokens import TokenIssuer
from modules.auth.service import AuthService
from modules.users.service import UserService
from modules.tweets.enrichment import EnrichmentPipeline
from modules.tweets.directory import FallbackUserDirectory
from modules.tweets.service import TweetService

from tests.fakes import (
    FakeClock,
    InMemoryUserRepository,
    InMemoryTweetRepository,
    StaticDirectory,
)


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest cost bcrypt accepts; keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    user_id: str = "test-user-123",
    username: str = "testuser",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        username: Username to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "username": username,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by app-level tests."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        user_directory_url="http://identity.test/api",
        user_directory_timeout=0.5,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def user_repo(clock) -> InMemoryUserRepository:
    return InMemoryUserRepository(clock)


@pytest.fixture
def tweet_repo(clock) -> InMemoryTweetRepository:
    return InMemoryTweetRepository(clock)


@pytest.fixture
def guard() -> OwnershipGuard:
    return OwnershipGuard()


@pytest.fixture
def credentials() -> CredentialStore:
    return CredentialStore(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret=TEST_JWT_SECRET)


@pytest.fixture
def auth_service(user_repo, credentials, token_issuer) -> AuthService:
    return AuthService(users=user_repo, credentials=credentials, tokens=token_issuer)


@pytest.fixture
def user_service(user_repo, guard) -> UserService:
    return UserService(user_repo, guard)


@pytest.fixture
def directory() -> StaticDirectory:
    return StaticDirectory()


@pytest.fixture
def pipeline(tweet_repo, directory) -> EnrichmentPipeline:
    return EnrichmentPipeline(tweet_repo, FallbackUserDirectory(directory, timeout=0.2))


@pytest.fixture
def tweet_service(tweet_repo, pipeline, guard) -> TweetService:
    return TweetService(repository=tweet_repo, pipeline=pipeline, guard=guard)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(test_settings, auth_service, user_service, tweet_service):
    """
    Application wired to the in-memory services.

    Mounts both identity and posting routers; the fixtures above share one
    user repository, so a registered user can immediately post.
    """
    application = create_app(test_settings)
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_tweet_service] = lambda: tweet_service
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)

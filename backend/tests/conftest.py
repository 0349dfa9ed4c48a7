"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import Settings
from shared.sanitizer import Sanitizer

from tests.fakes import (
    FakeCommentRepository,
    FakeConnectionRepository,
    FakeConversationRepository,
    FakeLikeRepository,
    FakePostRepository,
    FakeUserRepository,
)


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"
TEST_ISSUER = "ProSocialApi"
TEST_AUDIENCE = "ProSocialApiUsers"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = TEST_AUDIENCE,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing key
        audience: Audience claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    iat = now - timedelta(hours=2) if expired else now

    payload = {
        "sub": user_id,
        "email": email,
        "given_name": "Test",
        "family_name": "User",
        "jti": "test-jti",
        "iss": TEST_ISSUER,
        "aud": audience,
        "exp": int(exp.timestamp()),
        "iat": int(iat.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_test_settings(**overrides) -> Settings:
    """Settings with a test secret and cheap bcrypt rounds."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "jwt_issuer": TEST_ISSUER,
        "jwt_audience": TEST_AUDIENCE,
        "bcrypt_rounds": 4,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    return make_test_settings()


@pytest.fixture
def sanitizer() -> Sanitizer:
    return Sanitizer()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


# -----------------------------------------------------------------------------
# In-memory stores
# -----------------------------------------------------------------------------


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def connection_repo() -> FakeConnectionRepository:
    return FakeConnectionRepository()


@pytest.fixture
def post_repo() -> FakePostRepository:
    return FakePostRepository()


@pytest.fixture
def like_repo() -> FakeLikeRepository:
    return FakeLikeRepository()


@pytest.fixture
def comment_repo() -> FakeCommentRepository:
    return FakeCommentRepository()


@pytest.fixture
def conversation_repo() -> FakeConversationRepository:
    return FakeConversationRepository()


@pytest.fixture
def auth_service(user_repo, sanitizer, test_settings):
    from modules.auth.service import AuthService
    return AuthService(users=user_repo, sanitizer=sanitizer, settings=test_settings)


@pytest.fixture
def connection_service(connection_repo, user_repo):
    from modules.connections.service import ConnectionService
    return ConnectionService(connections=connection_repo, users=user_repo)


@pytest.fixture
def post_service(post_repo, like_repo, comment_repo, user_repo, sanitizer):
    from modules.posts.service import PostService
    return PostService(
        posts=post_repo,
        likes=like_repo,
        comments=comment_repo,
        users=user_repo,
        sanitizer=sanitizer,
    )


@pytest.fixture
def comment_service(comment_repo, post_repo, user_repo, sanitizer):
    from modules.comments.service import CommentService
    return CommentService(
        comments=comment_repo,
        posts=post_repo,
        users=user_repo,
        sanitizer=sanitizer,
    )


@pytest.fixture
def feed_service(post_repo, connection_service, post_service):
    from modules.feed.service import FeedService
    return FeedService(
        posts=post_repo,
        connections=connection_service,
        post_views=post_service,
    )


@pytest.fixture
def messaging_service(conversation_repo, user_repo, sanitizer):
    from modules.messaging.service import MessagingService
    return MessagingService(
        conversations=conversation_repo,
        users=user_repo,
        sanitizer=sanitizer,
    )


_QUERY_METHODS = (
    "select", "insert", "update", "upsert", "delete",
    "eq", "neq", "in_", "or_", "order", "limit", "range",
)


def mock_supabase(data: list | None = None, count: int | None = None):
    """
    Build a mock Supabase client whose query builder chains to itself.

    Returns:
        (client, query) - assert on `query.<method>.call_args` and set
        `query.execute.return_value` / `side_effect` as needed.
    """
    client = MagicMock()
    query = client.table.return_value
    for method in _QUERY_METHODS:
        getattr(query, method).return_value = query
    query.not_ = query
    query.execute.return_value.data = data if data is not None else []
    query.execute.return_value.count = count
    return client, query

"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory user directory, low-cost auth components, and a TestClient
wired to them through dependency overrides.
"""

import pytest
from datetime import datetime, timezone
from typing import Any, Optional
from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import (
    get_account_service,
    get_password_hasher,
    get_token_service,
    get_user_directory,
    reset_container,
)
from modules.auth.exceptions import DuplicateEmailError
from modules.auth.models import NewUser, User
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AccountService
from modules.auth.tokens import TokenService
from shared.config import get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Minimum bcrypt cost keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


class InMemoryUserDirectory:
    """Dict-backed IUserDirectory with the same uniqueness rule as the table."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def create(self, new_user: NewUser) -> User:
        if self.get_by_email(new_user.email) is not None:
            raise DuplicateEmailError(new_user.email)
        now = datetime.now(timezone.utc)
        user = User(id=self._next_id, created_at=now, updated_at=now, **new_user.model_dump())
        self._users[user.id] = user
        self._next_id += 1
        return user

    def update_profile(self, user_id: int, changes: dict[str, Any]) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = User.model_validate(
            {**user.model_dump(), **changes, "updated_at": datetime.now(timezone.utc)}
        )
        self._users[user_id] = updated
        return updated

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        user = self._users.get(user_id)
        if user is None:
            return False
        self._users[user_id] = user.model_copy(update={"password_hash": password_hash})
        return True

    def remove(self, user_id: int) -> None:
        """Simulate an account deleted outside the API."""
        self._users.pop(user_id, None)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the settings cache and service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def account_service(directory, hasher, tokens) -> AccountService:
    return AccountService(directory=directory, hasher=hasher, tokens=tokens)


@pytest.fixture
def app(directory, hasher, tokens, account_service):
    """Application with every auth dependency pointed at the test doubles."""
    application = create_app()
    application.dependency_overrides[get_user_directory] = lambda: directory
    application.dependency_overrides[get_password_hasher] = lambda: hasher
    application.dependency_overrides[get_token_service] = lambda: tokens
    application.dependency_overrides[get_account_service] = lambda: account_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def registration_payload() -> dict[str, str]:
    """A valid registration body."""
    return {
        "email": "a@x.com",
        "password": "secret1",
        "first_name": "Amina",
        "last_name": "Juma",
    }


@pytest.fixture
def registered(client, registration_payload) -> dict[str, Any]:
    """Register the default user over HTTP and return the response data."""
    response = client.post("/api/auth/register", json=registration_payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def auth_headers(registered) -> dict[str, str]:
    """Authorization headers carrying the registered user's token."""
    return {"Authorization": f"Bearer {registered['token']}"}


@pytest.fixture
def issue_token_at():
    """Issue a token signed with the test secret as if at ``issued_at``."""
    def issue(user_id: int, issued_at: datetime) -> str:
        return TokenService(TEST_JWT_SECRET, clock=lambda: issued_at).issue(user_id)
    return issue

"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
Email uniqueness is enforced by the table's unique constraint; a collision
on insert is reported as DuplicateEmailError.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import httpx
from postgrest.exceptions import APIError

from shared.models import Language
from shared.repository import BaseRepository
from .exceptions import DuplicateEmailError, UserDirectoryError
from .models import NewUser, User

logger = logging.getLogger(__name__)

USERS_TABLE = "users"

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Implements IUserDirectory. All methods return Pydantic models mapped
    from database rows; storage failures surface as UserDirectoryError.

    Note: This repository does NOT perform authentication checks.
    The account service and auth gate are responsible for that.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID."""
        result = self._run(
            "fetch user by id",
            lambda: self._db.table(USERS_TABLE).select("*").eq("id", user_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by normalized email."""
        result = self._run(
            "fetch user by email",
            lambda: self._db.table(USERS_TABLE).select("*").eq("email", email).execute(),
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, new_user: NewUser) -> User:
        """
        Insert a new user.

        Args:
            new_user: Fields for the new row, password already hashed.

        Returns:
            Created User with generated ID and timestamps.

        Raises:
            DuplicateEmailError: If the email violates the unique constraint.
        """
        data = new_user.model_dump(mode="json")
        try:
            result = self._db.table(USERS_TABLE).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(new_user.email)
            raise self._directory_error("insert user", e)
        except httpx.HTTPError as e:
            raise self._directory_error("insert user", e)

        if not result.data:
            raise UserDirectoryError("Insert into users returned no row")
        return self._map_to_user(result.data[0])

    def update_profile(self, user_id: int, changes: dict[str, Any]) -> Optional[User]:
        """
        Update profile columns for a user.

        Args:
            user_id: The user's ID.
            changes: Column values to write (already validated).

        Returns:
            The updated User, or None if no row matched.
        """
        if not changes:
            return self.get_by_id(user_id)

        data = {**changes, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._run(
            "update profile",
            lambda: self._db.table(USERS_TABLE).update(data).eq("id", user_id).execute(),
        )
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        """
        Replace a user's password hash.

        Returns:
            True if a row was updated.
        """
        data = {
            "password_hash": password_hash,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        result = self._run(
            "update password",
            lambda: self._db.table(USERS_TABLE).update(data).eq("id", user_id).execute(),
        )
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _run(self, action: str, query: Callable[[], Any]) -> Any:
        """Execute a query, wrapping client failures in UserDirectoryError."""
        try:
            return query()
        except (APIError, httpx.HTTPError) as e:
            raise self._directory_error(action, e)

    def _directory_error(self, action: str, error: Exception) -> UserDirectoryError:
        logger.error(f"User directory failed to {action}: {error}", exc_info=True)
        return UserDirectoryError(f"Failed to {action}", original_error=str(error))

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=int(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            phone=data.get("phone"),
            language=Language(data.get("language") or Language.EN.value),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

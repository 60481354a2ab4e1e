"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses implement domain-specific data access methods on top of
    ``self._db`` and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[User]):
            def get_by_id(self, user_id: int) -> Optional[User]:
                result = self._db.table("users").select("*").eq("id", user_id).execute()
                if not result.data:
                    return None
                return self._map_to_user(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

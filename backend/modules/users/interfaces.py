"""
Users module interfaces.

The auth module and the API layer depend on these protocols, not on the
Supabase-backed implementations, so tests can plug in in-memory fakes.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from .models import UserProfile, UserRecord, UpdateUserRequest


@runtime_checkable
class IUserRepository(Protocol):
    """Persistence contract for user records."""

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        """Return the user with the given ID, or None."""
        ...

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with the given email (exact match), or None."""
        ...

    def find_by_username_or_email(
        self,
        username: Optional[str],
        email: Optional[str],
    ) -> list[UserRecord]:
        """
        Return users matching either field in one lookup.

        Matching is exact and case-sensitive. A None field is not matched.
        """
        ...

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a user; the store assigns id and timestamps.

        Raises:
            UserAlreadyExistsError: If the username or email is already stored
        """
        ...

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        """
        Apply a partial update and refresh updated_at. None if absent.

        Raises:
            UserAlreadyExistsError: If the new username or email is already stored
        """
        ...

    def delete(self, user_id: str) -> bool:
        """Delete a user. False if absent."""
        ...


@runtime_checkable
class IUserService(Protocol):
    """Profile operations exposed by the identity service."""

    async def get_user(self, user_id: str) -> UserProfile:
        """
        Get a public profile.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def update_user(
        self,
        user_id: str,
        request: UpdateUserRequest,
        caller_id: str,
    ) -> UserProfile:
        """
        Update a profile owned by the caller.

        Raises:
            UserNotFoundError: If the user does not exist
            OwnershipError: If the caller is not that user
            UserAlreadyExistsError: If the new username/email is taken
        """
        ...

    async def delete_user(self, user_id: str, caller_id: str) -> None:
        """
        Delete a profile owned by the caller.

        Raises:
            UserNotFoundError: If the user does not exist
            OwnershipError: If the caller is not that user
        """
        ...

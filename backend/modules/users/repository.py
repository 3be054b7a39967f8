"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .models import UserRecord
from .exceptions import UserAlreadyExistsError

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def _quote(value: str) -> str:
    """Quote a value for a PostgREST ``or`` filter (handles , . : ( ) in emails)."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    TABLE = "users"

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        result = self._db.table(self.TABLE).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._db.table(self.TABLE).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def find_by_username_or_email(
        self,
        username: Optional[str],
        email: Optional[str],
    ) -> list[UserRecord]:
        """
        Find users holding either the username or the email.

        Both conditions go into a single ``or`` filter, so registration
        checks uniqueness with one round trip.
        """
        conditions = []
        if username is not None:
            conditions.append(f"username.eq.{_quote(username)}")
        if email is not None:
            conditions.append(f"email.eq.{_quote(email)}")
        if not conditions:
            return []

        result = self._db.table(self.TABLE).select("*").or_(",".join(conditions)).execute()
        return [self._map_to_user(row) for row in result.data]

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Create a new user record.

        Args:
            data: username, email, password_hash, first_name, last_name

        Returns:
            Created user with generated ID and timestamps.
        """
        now = self._now()
        row = {**data, "created_at": now, "updated_at": now}
        try:
            result = self._db.table(self.TABLE).insert(row).execute()
        except APIError as e:
            self._raise_if_duplicate(e)
            raise
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        row = {**data, "updated_at": self._now()}
        try:
            result = self._db.table(self.TABLE).update(row).eq("id", user_id).execute()
        except APIError as e:
            self._raise_if_duplicate(e)
            raise
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> bool:
        result = self._db.table(self.TABLE).delete().eq("id", user_id).execute()
        return bool(result.data)

    @staticmethod
    def _raise_if_duplicate(error: APIError) -> None:
        """
        Turn a unique constraint hit into a Conflict.

        The service checks uniqueness first, but two concurrent requests can
        both pass that check; the constraint decides which one wins.
        """
        if error.code == UNIQUE_VIOLATION:
            raise UserAlreadyExistsError() from error

    def _map_to_user(self, data: dict) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=str(data["id"]),
            username=data["username"],
            email=data["email"],
            password_hash=data["password_hash"],
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            bio=data.get("bio"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

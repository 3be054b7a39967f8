"""
Users service implementation.

Profile reads and owner-only profile mutations for the identity service.
"""

import logging

from shared.authorization import OwnershipGuard

from .interfaces import IUserService, IUserRepository
from .models import UserProfile, UpdateUserRequest
from .exceptions import UserNotFoundError, UserAlreadyExistsError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User profile service.

    Every mutation loads the record first (NotFound), then asks the
    ownership guard (Forbidden), then applies the change.
    """

    def __init__(self, repository: IUserRepository, guard: OwnershipGuard):
        self._repository = repository
        self._guard = guard

    async def get_user(self, user_id: str) -> UserProfile:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_profile()

    async def update_user(
        self,
        user_id: str,
        request: UpdateUserRequest,
        caller_id: str,
    ) -> UserProfile:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        self._guard.authorize(user.id, caller_id, "profile", user_id)

        changes = request.changes()
        new_username = changes.get("username")
        new_email = changes.get("email")
        if new_username is not None or new_email is not None:
            taken = self._repository.find_by_username_or_email(new_username, new_email)
            if any(other.id != user_id for other in taken):
                raise UserAlreadyExistsError("Username or email already exists")

        if not changes:
            return user.to_profile()

        updated = self._repository.update(user_id, changes)
        if updated is None:
            # Deleted between the read and the write
            raise UserNotFoundError(user_id)

        logger.info("User %s updated fields: %s", user_id, sorted(changes))
        return updated.to_profile()

    async def delete_user(self, user_id: str, caller_id: str) -> None:
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        self._guard.authorize(user.id, caller_id, "profile", user_id)

        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("User %s deleted", user_id)

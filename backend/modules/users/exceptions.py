"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError


class UserNotFoundError(NotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserAlreadyExistsError(ConflictError):
    """Raised when a username or email is already taken."""

    def __init__(self, message: str = "User with this email or username already exists"):
        super().__init__(message, code="USER_ALREADY_EXISTS")

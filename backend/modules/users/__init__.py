"""
Users module.

Public user profiles and owner-only profile mutations.

Public API:
- IUserService: Interface for profile operations
- IUserRepository: Persistence contract, also used by the auth module
- UserProfile: Public profile (never carries the password hash)
"""

from .interfaces import IUserService, IUserRepository
from .models import UserProfile, UserRecord, UpdateUserRequest
from .exceptions import UserNotFoundError, UserAlreadyExistsError

__all__ = [
    # Interfaces
    "IUserService",
    "IUserRepository",
    # Models
    "UserProfile",
    "UserRecord",
    "UpdateUserRequest",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
]

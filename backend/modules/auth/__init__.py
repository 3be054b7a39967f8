"""
Authentication module.

Handles registration, login, password hashing and bearer tokens.

Public API:
- IAuthService: Interface for auth operations
- CredentialStore: bcrypt password hashing
- TokenIssuer: JWT signing and verification
- TokenClaims: Verified token payload
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .credentials import CredentialStore
from .tokens import TokenIssuer
from .models import TokenClaims, RegisterRequest, LoginRequest, AuthResponse
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Building blocks
    "CredentialStore",
    "TokenIssuer",
    # Models
    "TokenClaims",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
]

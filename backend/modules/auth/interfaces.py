"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and keeps the API layer transport-agnostic.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, RegisterRequest, LoginRequest, TokenClaims


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Register a new user and sign them in.

        Raises:
            UserAlreadyExistsError: If the username or email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Exchange email and password for a token.

        Raises:
            InvalidCredentialsError: On unknown email or wrong password
        """
        ...

    def verify_token(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a bearer token.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated caller.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

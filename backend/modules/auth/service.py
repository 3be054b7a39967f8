"""
Authentication service implementation.

Composes the credential store and the token issuer into the register and
login flows, and validates bearer tokens for both services.
"""

import asyncio
import logging
from typing import Optional

from shared.models import AuthenticatedUser
from shared.exceptions import ValidationError
from modules.users.interfaces import IUserRepository
from modules.users.models import UserRecord
from modules.users.exceptions import UserAlreadyExistsError

from .interfaces import IAuthService
from .credentials import CredentialStore
from .tokens import TokenIssuer
from .models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
    PASSWORD_MAX_BYTES,
)
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Password hashing is CPU bound and deliberately slow, so it runs in a
    worker thread instead of on the event loop.
    """

    def __init__(
        self,
        users: IUserRepository,
        credentials: CredentialStore,
        tokens: TokenIssuer,
    ):
        self._users = users
        self._credentials = credentials
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> AuthResponse:
        if len(request.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValidationError(
                f"Password must be at most {PASSWORD_MAX_BYTES} bytes",
                code="PASSWORD_TOO_LONG",
            )

        existing = self._users.find_by_username_or_email(request.username, request.email)
        if existing:
            raise UserAlreadyExistsError()

        password_hash = await asyncio.to_thread(
            self._credentials.hash_password, request.password
        )
        user = self._users.create({
            "username": request.username,
            "email": request.email,
            "password_hash": password_hash,
            "first_name": request.first_name,
            "last_name": request.last_name,
        })

        logger.info("Registered user %s (%s)", user.id, user.username)
        return self._respond(user)

    async def login(self, request: LoginRequest) -> AuthResponse:
        user = self._users.get_by_email(request.email)

        if user is None:
            await asyncio.to_thread(self._credentials.verify_dummy, request.password)
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        valid = await asyncio.to_thread(
            self._credentials.verify_password, request.password, user.password_hash
        )
        if not valid:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return self._respond(user)

    def verify_token(self, token: Optional[str]) -> TokenClaims:
        return self._tokens.verify(token)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        claims = self._tokens.verify(token)
        return AuthenticatedUser(
            id=claims.sub,
            username=claims.username,
            email=claims.email,
        )

    def _respond(self, user: UserRecord) -> AuthResponse:
        token, _ = self._tokens.issue(user)
        return AuthResponse(
            access_token=token,
            expires_in=self._tokens.lifetime_seconds,
            user=user.to_profile(),
        )

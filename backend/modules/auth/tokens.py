"""
Bearer token issuing and verification.

Tokens are signed JWTs carrying subject id, username and email. Validity is
fully determined by signature and expiry; there is no server-side session.
"""

from datetime import datetime, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from modules.users.models import UserProfile

from .models import TokenClaims
from .exceptions import InvalidTokenError, ExpiredTokenError, MissingTokenError


class TokenIssuer:
    """Signs and verifies bearer tokens."""

    REQUIRED_CLAIMS = ["sub", "username", "email", "iat", "exp"]

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 24 * 60,
    ):
        if not secret:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expires_minutes = expires_minutes

    @property
    def lifetime_seconds(self) -> int:
        return self._expires_minutes * 60

    def issue(self, user: UserProfile) -> tuple[str, TokenClaims]:
        """
        Create a signed token for ``user``.

        Returns:
            The encoded token and the claims it carries
        """
        issued_at = int(datetime.now(timezone.utc).timestamp())
        claims = TokenClaims(
            sub=user.id,
            username=user.username,
            email=user.email,
            iat=issued_at,
            exp=issued_at + self.lifetime_seconds,
        )
        token = jwt.encode(claims.model_dump(), self._secret, algorithm=self._algorithm)
        return token, claims

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a token and return its claims. Fails closed.

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token has expired
            InvalidTokenError: On bad signature or malformed payload
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": self.REQUIRED_CLAIMS},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid authentication token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Malformed token claims")

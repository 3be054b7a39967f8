"""
Bearer token authentication dependencies.

Extracts the bearer token from the Authorization header and hands it to the
auth service. Routes receive an AuthenticatedUser and never see raw claims.

Token failures are AuthenticationErrors and are rendered by the app's
ChirperError handler (401, ErrorResponse body, WWW-Authenticate header).
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import MissingTokenError

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Raw bearer token, if one was sent. Forwarded to the identity service."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.post("/tweets")
        async def create(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if credentials is None:
        raise MissingTokenError("Missing authorization header")

    return await auth.validate_token(credentials.credentials)

"""
User directory clients for the posting service.

Two implementations of IUserDirectory:
- HttpUserDirectory: calls the identity service over HTTP and raises on failure
- FallbackUserDirectory: wraps any directory, bounds each lookup with a
  timeout, and substitutes an "Unknown User" summary on any failure

Author metadata is cosmetic, so a directory outage degrades the author field
of a tweet instead of failing the read.
"""

import asyncio
import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from .interfaces import IUserDirectory
from .models import AuthorSummary
from .exceptions import DirectoryLookupError

logger = logging.getLogger(__name__)


class HttpUserDirectory(IUserDirectory):
    """
    Resolves authors with ``GET {base_url}/users/{id}``.

    The caller's bearer token is forwarded, since profile reads on the
    identity service require authentication. The HTTP client is owned and
    closed by whoever created it (the service container).
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient,
        timeout: float = 3.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client = client

    async def resolve_author(
        self,
        user_id: str,
        access_token: Optional[str] = None,
    ) -> AuthorSummary:
        url = f"{self._base_url}/users/{quote(user_id, safe='')}"
        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"

        try:
            response = await self._client.get(url, headers=headers, timeout=self._timeout)
        except httpx.HTTPError as e:
            raise DirectoryLookupError(user_id, f"{type(e).__name__}: {e}")

        if not response.is_success:
            raise DirectoryLookupError(
                user_id,
                f"identity service returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return AuthorSummary.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            # json decode errors are ValueErrors
            raise DirectoryLookupError(user_id, f"malformed response: {e}")


class FallbackUserDirectory(IUserDirectory):
    """
    Wraps a directory with a per-lookup timeout and a fallback summary.

    Each lookup is independent: one failure never affects its siblings, and
    a slow lookup is abandoned once its own timeout elapses.
    """

    def __init__(self, inner: IUserDirectory, timeout: float = 3.0):
        self._inner = inner
        self._timeout = timeout

    async def resolve_author(
        self,
        user_id: str,
        access_token: Optional[str] = None,
    ) -> AuthorSummary:
        try:
            return await asyncio.wait_for(
                self._inner.resolve_author(user_id, access_token),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Author lookup for %s timed out after %.1fs, using fallback",
                user_id,
                self._timeout,
            )
        except Exception as e:
            logger.warning("Author lookup for %s failed (%s), using fallback", user_id, e)

        return AuthorSummary.unknown(user_id)

"""
Error responses.

Maps the exception hierarchy in shared.exceptions to HTTP statuses in one
place, so modules raise domain errors and never build HTTP responses.
"""

import logging
from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import (
    ChirperError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str
    details: Optional[dict[str, Any]] = None


# Checked in order; the first matching base class wins
STATUS_BY_ERROR: list[tuple[type[ChirperError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, 422),
]


def status_for(error: ChirperError) -> int:
    """HTTP status for a domain error. Unmapped errors are server errors."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def chirper_error_handler(request: Request, exc: ChirperError) -> JSONResponse:
    """Render a ChirperError as an ErrorResponse."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Unhandled %s on %s: %s", exc.code, request.url.path, exc.message)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(**exc.to_dict()).model_dump(),
        headers=headers,
    )

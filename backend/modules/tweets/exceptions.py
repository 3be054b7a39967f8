"""
Tweets module exceptions.
"""

from typing import Optional

from shared.exceptions import NotFoundError, ValidationError, ExternalServiceError


class TweetNotFoundError(NotFoundError):
    """Raised when a tweet is not found."""

    def __init__(self, tweet_id: str):
        super().__init__(
            f"Tweet not found: {tweet_id}",
            code="TWEET_NOT_FOUND",
            details={"tweet_id": tweet_id},
        )


class TweetContentError(ValidationError):
    """Raised when tweet content is empty or too long."""

    def __init__(self, message: str, length: int):
        super().__init__(
            message,
            code="INVALID_TWEET_CONTENT",
            details={"length": length},
        )


class InvalidPageError(ValidationError):
    """Raised when page or limit is not a positive integer."""

    def __init__(self, page: int, limit: int):
        super().__init__(
            "Page and limit must be positive integers",
            code="INVALID_PAGE",
            details={"page": page, "limit": limit},
        )


class DirectoryLookupError(ExternalServiceError):
    """
    Raised by the HTTP user directory when an author cannot be resolved.

    Never leaves the tweets module: the fallback directory turns it into
    an "Unknown User" summary.
    """

    def __init__(self, user_id: str, reason: str, status_code: Optional[int] = None):
        super().__init__(
            f"Could not resolve user {user_id}: {reason}",
            service="user-directory",
            code="DIRECTORY_LOOKUP_FAILED",
            details={"user_id": user_id, "status_code": status_code},
        )

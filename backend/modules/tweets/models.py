"""
Tweets module data models.

Tweet is the stored record. AuthoredTweet is built at read time by
attaching an AuthorSummary resolved from the identity service; it is never
persisted or cached beyond the request that built it.
"""

from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


TWEET_MAX_LENGTH = 280
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

UNKNOWN_USERNAME = "Unknown User"


class Tweet(BaseModel):
    """A stored tweet."""

    id: str = Field(..., description="Tweet ID (UUID)")
    content: str = Field(..., description="Tweet text")
    author_id: str = Field(..., description="ID of the authoring user")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last content change")


class AuthorSummary(BaseModel):
    """
    Minimal public profile attached to a tweet for display.

    Accepts both snake_case and camelCase names when parsed from the
    identity service.
    """

    id: str
    username: str
    first_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("first_name", "firstName")
    )
    last_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("last_name", "lastName")
    )

    @classmethod
    def unknown(cls, user_id: str) -> "AuthorSummary":
        """Fallback summary used when the author could not be resolved."""
        return cls(id=user_id, username=UNKNOWN_USERNAME, first_name=None, last_name=None)


class AuthoredTweet(Tweet):
    """A tweet plus its best-effort author summary."""

    author: AuthorSummary


class TweetListResponse(BaseModel):
    """One page of tweets, newest first."""

    tweets: list[AuthoredTweet] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Total number of tweets")
    page: int = Field(..., ge=1, description="Page number (1-indexed)")
    limit: int = Field(..., ge=1, description="Items per page")
    total_pages: int = Field(..., ge=0, description="ceil(total / limit)")


class CreateTweetRequest(BaseModel):
    """Request to create a tweet."""

    model_config = {"extra": "forbid"}

    content: str = Field(..., min_length=1, max_length=TWEET_MAX_LENGTH)


class UpdateTweetRequest(BaseModel):
    """
    Request to replace a tweet's content.

    Length is checked by the service after authorship, so a non-author
    always gets 403 whatever the content.
    """

    model_config = {"extra": "forbid"}

    content: str = Field(..., description=f"New text, 1-{TWEET_MAX_LENGTH} characters")

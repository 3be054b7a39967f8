"""
Tweets module interfaces.

The posting service is built from three seams: a tweet store, a user
directory and the service the API layer talks to. Each is a protocol so
tests can substitute deterministic fakes without network or database I/O.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    AuthoredTweet,
    AuthorSummary,
    Tweet,
    TweetListResponse,
    DEFAULT_PAGE,
    DEFAULT_LIMIT,
)


@runtime_checkable
class ITweetRepository(Protocol):
    """
    CRUD over tweet records. Owns ordering, pagination and content rules.
    """

    def create(self, content: str, author_id: str) -> Tweet:
        """
        Persist a tweet. The store assigns id and timestamps.

        Raises:
            TweetContentError: If content is empty or longer than 280 chars
        """
        ...

    def list_page(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> tuple[list[Tweet], int]:
        """
        Return one page of tweets, newest first, and the total count.

        Ties on created_at are broken by id. A page past the end is empty.

        Raises:
            InvalidPageError: If page or limit is not positive
        """
        ...

    def get_by_id(self, tweet_id: str) -> Optional[Tweet]:
        """Return the tweet, or None."""
        ...

    def update_content(self, tweet_id: str, content: str) -> Optional[Tweet]:
        """
        Replace content and refresh updated_at. None if absent.

        Raises:
            TweetContentError: If content is empty or longer than 280 chars
        """
        ...

    def delete(self, tweet_id: str) -> bool:
        """Delete a tweet. False if absent."""
        ...


@runtime_checkable
class IUserDirectory(Protocol):
    """Resolves a user id to a public author summary."""

    async def resolve_author(
        self,
        user_id: str,
        access_token: Optional[str] = None,
    ) -> AuthorSummary:
        """
        Look up an author.

        Args:
            user_id: ID of the user to resolve
            access_token: Caller's bearer token, forwarded to the identity service

        Returns:
            The author's summary
        """
        ...


@runtime_checkable
class ITweetService(Protocol):
    """Tweet operations exposed to the API layer."""

    async def create_tweet(
        self,
        author_id: str,
        content: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        ...

    async def list_tweets(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        access_token: Optional[str] = None,
    ) -> TweetListResponse:
        ...

    async def get_tweet(
        self,
        tweet_id: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        ...

    async def update_tweet(
        self,
        tweet_id: str,
        content: str,
        caller_id: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        ...

    async def delete_tweet(self, tweet_id: str, caller_id: str) -> None:
        ...

"""
Read-time enrichment of tweets with author summaries.

For a page of tweets, one author lookup is issued per tweet and all lookups
run concurrently. Results are merged back by position, so the output order
is the store's order no matter which lookup finishes first. Lookup failures
only ever degrade the ``author`` field; counts, order and pagination
metadata come from the store alone.
"""

import asyncio
import logging
import math
from typing import Optional

from .interfaces import ITweetRepository, IUserDirectory
from .models import (
    AuthoredTweet,
    AuthorSummary,
    Tweet,
    TweetListResponse,
    DEFAULT_PAGE,
    DEFAULT_LIMIT,
)
from .exceptions import TweetNotFoundError

logger = logging.getLogger(__name__)


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items at ``limit`` per page."""
    return math.ceil(total / limit)


class EnrichmentPipeline:
    """Combines tweet store reads with user directory lookups."""

    def __init__(self, repository: ITweetRepository, directory: IUserDirectory):
        self._repository = repository
        self._directory = directory

    async def enrich(
        self,
        tweets: list[Tweet],
        access_token: Optional[str] = None,
    ) -> list[AuthoredTweet]:
        """
        Attach an author summary to each tweet.

        Args:
            tweets: Tweets in the order they should be returned
            access_token: Caller's token, forwarded to the directory

        Returns:
            AuthoredTweets in the same order as ``tweets``
        """
        if not tweets:
            return []

        # Run all lookups in parallel; gather keeps positional order
        results = await asyncio.gather(
            *(self._directory.resolve_author(t.author_id, access_token) for t in tweets),
            return_exceptions=True,
        )

        enriched = []
        for tweet, result in zip(tweets, results):
            if isinstance(result, BaseException):
                logger.error("Author lookup for %s raised %r", tweet.author_id, result)
                author = AuthorSummary.unknown(tweet.author_id)
            else:
                author = result
            enriched.append(AuthoredTweet(**tweet.model_dump(), author=author))
        return enriched

    async def list_enriched(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        access_token: Optional[str] = None,
    ) -> TweetListResponse:
        """
        One page of tweets, newest first, each with its author.

        A page past the end returns an empty list with the real totals.
        """
        tweets, total = self._repository.list_page(page, limit)
        enriched = await self.enrich(tweets, access_token)

        return TweetListResponse(
            tweets=enriched,
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages(total, limit),
        )

    async def get_enriched(
        self,
        tweet_id: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        """
        A single tweet with its author.

        Raises:
            TweetNotFoundError: If the tweet does not exist
        """
        tweet = self._repository.get_by_id(tweet_id)
        if tweet is None:
            raise TweetNotFoundError(tweet_id)

        [enriched] = await self.enrich([tweet], access_token)
        return enriched

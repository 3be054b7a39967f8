"""
Tweets service implementation.

Reads go through the enrichment pipeline. Mutations load the tweet, check
authorship with the shared ownership guard, and only then touch the store.
"""

import logging
from typing import Optional

from shared.authorization import OwnershipGuard

from .interfaces import ITweetService, ITweetRepository
from .enrichment import EnrichmentPipeline
from .models import AuthoredTweet, TweetListResponse, DEFAULT_PAGE, DEFAULT_LIMIT
from .exceptions import TweetNotFoundError

logger = logging.getLogger(__name__)


class TweetService(ITweetService):
    """
    Tweet service backed by a tweet store and the enrichment pipeline.

    Author id is fixed at creation; no operation here can change it.
    """

    def __init__(
        self,
        repository: ITweetRepository,
        pipeline: EnrichmentPipeline,
        guard: OwnershipGuard,
    ):
        self._repository = repository
        self._pipeline = pipeline
        self._guard = guard

    async def create_tweet(
        self,
        author_id: str,
        content: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        """Create a tweet authored by the caller and return it enriched."""
        tweet = self._repository.create(content, author_id)
        logger.info("Tweet %s created by %s", tweet.id, author_id)

        [enriched] = await self._pipeline.enrich([tweet], access_token)
        return enriched

    async def list_tweets(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        access_token: Optional[str] = None,
    ) -> TweetListResponse:
        return await self._pipeline.list_enriched(page, limit, access_token)

    async def get_tweet(
        self,
        tweet_id: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        return await self._pipeline.get_enriched(tweet_id, access_token)

    async def update_tweet(
        self,
        tweet_id: str,
        content: str,
        caller_id: str,
        access_token: Optional[str] = None,
    ) -> AuthoredTweet:
        """
        Replace a tweet's content.

        Raises:
            TweetNotFoundError: If the tweet does not exist
            OwnershipError: If the caller is not the author
            TweetContentError: If the new content is invalid
        """
        tweet = self._repository.get_by_id(tweet_id)
        if tweet is None:
            raise TweetNotFoundError(tweet_id)

        self._guard.authorize(tweet.author_id, caller_id, "tweets", tweet_id)

        updated = self._repository.update_content(tweet_id, content)
        if updated is None:
            raise TweetNotFoundError(tweet_id)
        logger.info("Tweet %s updated by %s", tweet_id, caller_id)

        [enriched] = await self._pipeline.enrich([updated], access_token)
        return enriched

    async def delete_tweet(self, tweet_id: str, caller_id: str) -> None:
        """
        Delete a tweet.

        Raises:
            TweetNotFoundError: If the tweet does not exist
            OwnershipError: If the caller is not the author
        """
        tweet = self._repository.get_by_id(tweet_id)
        if tweet is None:
            raise TweetNotFoundError(tweet_id)

        self._guard.authorize(tweet.author_id, caller_id, "tweets", tweet_id)

        if not self._repository.delete(tweet_id):
            raise TweetNotFoundError(tweet_id)
        logger.info("Tweet %s deleted by %s", tweet_id, caller_id)

import pytest

from modules.tweets.exceptions import TweetNotFoundError, TweetContentError
from shared.authorization import OwnershipError
from shared.exceptions import ValidationError

from tests.fakes import make_tweet, summary_for


class TestCreateTweet:
    @pytest.mark.asyncio
    async def test_create_returns_enriched(self, tweet_service, tweet_repo):
        tweet = await tweet_service.create_tweet("user-1", "Hello world", "token-abc")

        assert tweet.content == "Hello world"
        assert tweet.author_id == "user-1"
        assert tweet.author == summary_for("user-1")
        assert tweet.created_at == tweet.updated_at
        assert tweet_repo.get_by_id(tweet.id) is not None

    @pytest.mark.asyncio
    async def test_exactly_280_characters(self, tweet_service):
        tweet = await tweet_service.create_tweet("user-1", "x" * 280)
        assert len(tweet.content) == 280

    @pytest.mark.asyncio
    async def test_281_characters_rejected(self, tweet_service, tweet_repo):
        with pytest.raises(TweetContentError) as exc_info:
            await tweet_service.create_tweet("user-1", "x" * 281)
        assert isinstance(exc_info.value, ValidationError)
        assert tweet_repo.tweets == {}

    @pytest.mark.asyncio
    async def test_whitespace_only_rejected(self, tweet_service):
        with pytest.raises(TweetContentError):
            await tweet_service.create_tweet("user-1", "   ")


class TestListAndGet:
    @pytest.mark.asyncio
    async def test_list(self, tweet_service, tweet_repo):
        for i in range(1, 4):
            tweet_repo.add(make_tweet(i))

        result = await tweet_service.list_tweets(page=1, limit=2)

        assert [t.id for t in result.tweets] == ["tweet-003", "tweet-002"]
        assert result.total_pages == 2

    @pytest.mark.asyncio
    async def test_get(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1))
        tweet = await tweet_service.get_tweet("tweet-001")
        assert tweet.author.username == "user-author-1"

    @pytest.mark.asyncio
    async def test_get_missing(self, tweet_service):
        with pytest.raises(TweetNotFoundError):
            await tweet_service.get_tweet("missing")


class TestUpdateTweet:
    @pytest.mark.asyncio
    async def test_author_can_update(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        tweet = await tweet_service.update_tweet("tweet-001", "Edited", caller_id="user-1")

        assert tweet.content == "Edited"
        assert tweet.author_id == "user-1"
        assert tweet.updated_at > tweet.created_at
        assert tweet_repo.get_by_id("tweet-001").content == "Edited"

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        with pytest.raises(OwnershipError):
            await tweet_service.update_tweet("tweet-001", "Edited", caller_id="user-2")
        assert tweet_repo.get_by_id("tweet-001").content == "Tweet number 1"

    @pytest.mark.asyncio
    async def test_forbidden_regardless_of_content(self, tweet_service, tweet_repo):
        """Ownership is checked before content, so invalid content from a
        non-author is still Forbidden."""
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        with pytest.raises(OwnershipError):
            await tweet_service.update_tweet("tweet-001", "x" * 281, caller_id="user-2")

    @pytest.mark.asyncio
    async def test_missing_before_forbidden(self, tweet_service):
        """A missing tweet is NotFound even for a caller who could not own it."""
        with pytest.raises(TweetNotFoundError):
            await tweet_service.update_tweet("missing", "Edited", caller_id="user-2")

    @pytest.mark.asyncio
    async def test_invalid_content_from_author(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        with pytest.raises(TweetContentError):
            await tweet_service.update_tweet("tweet-001", "x" * 281, caller_id="user-1")
        assert tweet_repo.get_by_id("tweet-001").content == "Tweet number 1"


class TestDeleteTweet:
    @pytest.mark.asyncio
    async def test_author_can_delete(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        await tweet_service.delete_tweet("tweet-001", caller_id="user-1")

        assert tweet_repo.get_by_id("tweet-001") is None

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, tweet_service, tweet_repo):
        tweet_repo.add(make_tweet(1, author_id="user-1"))

        with pytest.raises(OwnershipError):
            await tweet_service.delete_tweet("tweet-001", caller_id="user-2")
        assert tweet_repo.get_by_id("tweet-001") is not None

    @pytest.mark.asyncio
    async def test_missing(self, tweet_service):
        with pytest.raises(TweetNotFoundError):
            await tweet_service.delete_tweet("missing", caller_id="user-1")

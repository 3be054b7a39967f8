"""
Tweet repository for database access.

Encapsulates all Supabase queries and data mapping for the ``tweets`` table,
plus the content and pagination rules every tweet store must apply.
"""

from typing import Optional

from shared.repository import BaseRepository
from .models import Tweet, TWEET_MAX_LENGTH, DEFAULT_PAGE, DEFAULT_LIMIT
from .exceptions import TweetContentError, InvalidPageError


def validate_content(content: str) -> str:
    """
    Check tweet content before it is persisted.

    Raises:
        TweetContentError: If content is blank or longer than 280 chars
    """
    if not content or not content.strip():
        raise TweetContentError("Tweet content cannot be empty", len(content or ""))
    if len(content) > TWEET_MAX_LENGTH:
        raise TweetContentError(
            f"Tweet content cannot exceed {TWEET_MAX_LENGTH} characters",
            len(content),
        )
    return content


def page_offset(page: int, limit: int) -> int:
    """
    Zero-based row offset of a 1-indexed page.

    Raises:
        InvalidPageError: If page or limit is not positive
    """
    if page < 1 or limit < 1:
        raise InvalidPageError(page, limit)
    return (page - 1) * limit


class TweetRepository(BaseRepository[Tweet]):
    """
    Repository for tweet data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying authorship.
    """

    TABLE = "tweets"

    def create(self, content: str, author_id: str) -> Tweet:
        validate_content(content)
        now = self._now()
        row = {
            "content": content,
            "author_id": author_id,
            "created_at": now,
            "updated_at": now,
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_tweet(result.data[0])

    def list_page(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> tuple[list[Tweet], int]:
        """
        List tweets with pagination, most recent first.

        Args:
            page: Page number (1-indexed).
            limit: Items per page.

        Returns:
            The page of tweets and the total number of tweets.
        """
        offset = page_offset(page, limit)

        count_result = (
            self._db.table(self.TABLE).select("id", count="exact", head=True).execute()
        )
        total = count_result.count or 0

        # Asking PostgREST for a range past the end is an error, not an empty page
        if offset >= total:
            return [], total

        result = (
            self._db.table(self.TABLE)
            .select("*")
            .order("created_at", desc=True)
            .order("id", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [self._map_to_tweet(row) for row in result.data], total

    def get_by_id(self, tweet_id: str) -> Optional[Tweet]:
        result = self._db.table(self.TABLE).select("*").eq("id", tweet_id).execute()
        if not result.data:
            return None
        return self._map_to_tweet(result.data[0])

    def update_content(self, tweet_id: str, content: str) -> Optional[Tweet]:
        validate_content(content)
        data = {"content": content, "updated_at": self._now()}
        result = self._db.table(self.TABLE).update(data).eq("id", tweet_id).execute()
        if not result.data:
            return None
        return self._map_to_tweet(result.data[0])

    def delete(self, tweet_id: str) -> bool:
        result = self._db.table(self.TABLE).delete().eq("id", tweet_id).execute()
        return bool(result.data)

    def _map_to_tweet(self, data: dict) -> Tweet:
        """Map database row to Tweet model."""
        return Tweet(
            id=str(data["id"]),
            content=data["content"],
            author_id=str(data["author_id"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

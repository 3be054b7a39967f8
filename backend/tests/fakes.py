"""
In-memory fakes for repositories and the user directory.

They follow the same contracts as the Supabase-backed repositories and the
HTTP directory, so services can be tested without database or network I/O.
"""

import asyncio
import itertools
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from modules.users.interfaces import IUserRepository
from modules.users.models import UserRecord
from modules.tweets.interfaces import ITweetRepository, IUserDirectory
from modules.tweets.models import AuthorSummary, Tweet
from modules.tweets.repository import validate_content, page_offset
from modules.tweets.exceptions import DirectoryLookupError


BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    """Strictly increasing timestamps, one second apart."""

    def __init__(self):
        self._ticks = itertools.count()

    def now(self) -> datetime:
        return BASE_TIME + timedelta(seconds=next(self._ticks))


class InMemoryUserRepository(IUserRepository):
    def __init__(self, clock: Optional[FakeClock] = None):
        self.users: dict[str, UserRecord] = {}
        self.lookups = 0
        self._clock = clock or FakeClock()

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.email == email), None)

    def find_by_username_or_email(
        self,
        username: Optional[str],
        email: Optional[str],
    ) -> list[UserRecord]:
        self.lookups += 1
        return [
            u for u in self.users.values()
            if (username is not None and u.username == username)
            or (email is not None and u.email == email)
        ]

    def create(self, data: dict[str, Any]) -> UserRecord:
        now = self._clock.now()
        user = UserRecord(id=str(uuid.uuid4()), created_at=now, updated_at=now, **data)
        self.users[user.id] = user
        return user

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserRecord]:
        user = self.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={**data, "updated_at": self._clock.now()})
        self.users[user_id] = updated
        return updated

    def delete(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryTweetRepository(ITweetRepository):
    def __init__(self, clock: Optional[FakeClock] = None):
        self.tweets: dict[str, Tweet] = {}
        self._clock = clock or FakeClock()

    def create(self, content: str, author_id: str) -> Tweet:
        validate_content(content)
        now = self._clock.now()
        tweet = Tweet(
            id=str(uuid.uuid4()),
            content=content,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )
        self.tweets[tweet.id] = tweet
        return tweet

    def add(self, tweet: Tweet) -> Tweet:
        """Seed a tweet with fixed id and timestamps."""
        self.tweets[tweet.id] = tweet
        return tweet

    def list_page(self, page: int = 1, limit: int = 10) -> tuple[list[Tweet], int]:
        offset = page_offset(page, limit)
        ordered = sorted(
            self.tweets.values(),
            key=lambda t: (t.created_at, t.id),
            reverse=True,
        )
        return ordered[offset:offset + limit], len(ordered)

    def get_by_id(self, tweet_id: str) -> Optional[Tweet]:
        return self.tweets.get(tweet_id)

    def update_content(self, tweet_id: str, content: str) -> Optional[Tweet]:
        validate_content(content)
        tweet = self.tweets.get(tweet_id)
        if tweet is None:
            return None
        updated = tweet.model_copy(update={"content": content, "updated_at": self._clock.now()})
        self.tweets[tweet_id] = updated
        return updated

    def delete(self, tweet_id: str) -> bool:
        return self.tweets.pop(tweet_id, None) is not None


def summary_for(user_id: str) -> AuthorSummary:
    """The summary StaticDirectory returns for ``user_id``."""
    return AuthorSummary(
        id=user_id,
        username=f"user-{user_id}",
        first_name="First",
        last_name="Last",
    )


class StaticDirectory(IUserDirectory):
    """
    Directory with per-user behaviour.

    Users in ``failing`` raise, users in ``delays`` sleep first, everyone
    else resolves to ``summary_for(user_id)``.
    """

    def __init__(
        self,
        failing: Optional[set[str]] = None,
        delays: Optional[dict[str, float]] = None,
    ):
        self.failing = failing or set()
        self.delays = delays or {}
        self.calls: list[tuple[str, Optional[str]]] = []

    async def resolve_author(
        self,
        user_id: str,
        access_token: Optional[str] = None,
    ) -> AuthorSummary:
        self.calls.append((user_id, access_token))
        if user_id in self.delays:
            await asyncio.sleep(self.delays[user_id])
        if user_id in self.failing:
            raise DirectoryLookupError(user_id, "simulated outage")
        return summary_for(user_id)


def make_tweet(index: int, author_id: str = "author-1", **overrides) -> Tweet:
    """A tweet created ``index`` seconds after BASE_TIME."""
    created = BASE_TIME + timedelta(seconds=index)
    data = {
        "id": f"tweet-{index:03d}",
        "content": f"Tweet number {index}",
        "author_id": author_id,
        "created_at": created,
        "updated_at": created,
    }
    data.update(overrides)
    return Tweet(**data)

"""
Tweets module.

Tweet CRUD with read-time author enrichment.

Public API:
- ITweetService: Interface for tweet operations
- ITweetRepository: Tweet store contract (ordering, pagination, content rules)
- IUserDirectory: Author lookup contract
- EnrichmentPipeline: Attaches author summaries to tweets
- AuthoredTweet, TweetListResponse: Read models
"""

from .interfaces import ITweetService, ITweetRepository, IUserDirectory
from .enrichment import EnrichmentPipeline
from .models import (
    Tweet,
    AuthoredTweet,
    AuthorSummary,
    TweetListResponse,
    CreateTweetRequest,
    UpdateTweetRequest,
    UNKNOWN_USERNAME,
)
from .exceptions import (
    TweetNotFoundError,
    TweetContentError,
    InvalidPageError,
    DirectoryLookupError,
)

__all__ = [
    # Interfaces
    "ITweetService",
    "ITweetRepository",
    "IUserDirectory",
    "EnrichmentPipeline",
    # Models
    "Tweet",
    "AuthoredTweet",
    "AuthorSummary",
    "TweetListResponse",
    "CreateTweetRequest",
    "UpdateTweetRequest",
    "UNKNOWN_USERNAME",
    # Exceptions
    "TweetNotFoundError",
    "TweetContentError",
    "InvalidPageError",
    "DirectoryLookupError",
]

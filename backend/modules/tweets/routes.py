"""
Tweet API endpoints.

Provides REST endpoints for tweet CRUD. Reads come back enriched with the
author's summary; the caller's bearer token is forwarded to the identity
service for those lookups.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_user, get_access_token
from api.dependencies import get_tweet_service
from shared.models import AuthenticatedUser

from .interfaces import ITweetService
from .models import (
    AuthoredTweet,
    CreateTweetRequest,
    UpdateTweetRequest,
    TweetListResponse,
    DEFAULT_PAGE,
    DEFAULT_LIMIT,
    MAX_LIMIT,
)

router = APIRouter()


@router.post("", response_model=AuthoredTweet, status_code=201)
async def create_tweet(
    request: CreateTweetRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    token: Optional[str] = Depends(get_access_token),
    service: ITweetService = Depends(get_tweet_service),
) -> AuthoredTweet:
    """
    Create a tweet authored by the caller.
    """
    return await service.create_tweet(user.id, request.content, token)


@router.get("", response_model=TweetListResponse)
async def list_tweets(
    page: int = Query(default=DEFAULT_PAGE, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page"),
    user: AuthenticatedUser = Depends(get_current_user),
    token: Optional[str] = Depends(get_access_token),
    service: ITweetService = Depends(get_tweet_service),
) -> TweetListResponse:
    """
    List tweets, most recent first.

    A page past the end returns an empty list, not an error.
    """
    return await service.list_tweets(page, limit, token)


@router.get("/{tweet_id}", response_model=AuthoredTweet)
async def get_tweet(
    tweet_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    token: Optional[str] = Depends(get_access_token),
    service: ITweetService = Depends(get_tweet_service),
) -> AuthoredTweet:
    return await service.get_tweet(tweet_id, token)


@router.put("/{tweet_id}", response_model=AuthoredTweet)
async def update_tweet(
    tweet_id: str,
    request: UpdateTweetRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    token: Optional[str] = Depends(get_access_token),
    service: ITweetService = Depends(get_tweet_service),
) -> AuthoredTweet:
    """
    Replace a tweet's content. 404 if it does not exist, 403 if it is not yours.
    """
    return await service.update_tweet(tweet_id, request.content, user.id, token)


@router.delete("/{tweet_id}")
async def delete_tweet(
    tweet_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITweetService = Depends(get_tweet_service),
) -> dict[str, str]:
    """
    Delete a tweet. 404 if it does not exist, 403 if it is not yours.
    """
    await service.delete_tweet(tweet_id, user.id)
    return {"message": "Tweet deleted successfully"}

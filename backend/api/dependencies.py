"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Settings are read once and passed into every constructor;
nothing below the container reads the environment.

The posting service reaches the identity service through IUserDirectory, so
running the two as separate processes only changes the directory URL.
"""

from typing import TYPE_CHECKING, Optional

import httpx

from fastapi import Depends, Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from shared.authorization import OwnershipGuard
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService, IUserRepository
    from modules.tweets.interfaces import ITweetService, ITweetRepository, IUserDirectory
    from modules.tweets.enrichment import EnrichmentPipeline


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self.reset()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self._settings)
        return self._db

    @property
    def guard(self) -> "OwnershipGuard":
        """Get the ownership guard shared by users and tweets."""
        if self._guard is None:
            from shared.authorization import OwnershipGuard
            self._guard = OwnershipGuard()
        return self._guard

    @property
    def user_repository(self) -> "IUserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def tweet_repository(self) -> "ITweetRepository":
        if self._tweet_repository is None:
            from modules.tweets.repository import TweetRepository
            self._tweet_repository = TweetRepository(self.db)
        return self._tweet_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.credentials import CredentialStore
            from modules.auth.tokens import TokenIssuer
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.user_repository,
                credentials=CredentialStore(rounds=self._settings.bcrypt_rounds),
                tokens=TokenIssuer(
                    secret=self._settings.jwt_secret,
                    algorithm=self._settings.jwt_algorithm,
                    expires_minutes=self._settings.jwt_expires_minutes,
                ),
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(self.user_repository, self.guard)
        return self._user_service

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Shared HTTP client for calls to the identity service."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._settings.user_directory_timeout,
            )
        return self._http_client

    @property
    def directory(self) -> "IUserDirectory":
        """Get the user directory, wrapped with timeout and fallback."""
        if self._directory is None:
            from modules.tweets.directory import HttpUserDirectory, FallbackUserDirectory
            self._directory = FallbackUserDirectory(
                HttpUserDirectory(
                    self._settings.user_directory_url,
                    client=self.http_client,
                    timeout=self._settings.user_directory_timeout,
                ),
                timeout=self._settings.user_directory_timeout,
            )
        return self._directory

    @property
    def pipeline(self) -> "EnrichmentPipeline":
        if self._pipeline is None:
            from modules.tweets.enrichment import EnrichmentPipeline
            self._pipeline = EnrichmentPipeline(self.tweet_repository, self.directory)
        return self._pipeline

    @property
    def tweets(self) -> "ITweetService":
        """Get the tweet service instance."""
        if self._tweet_service is None:
            from modules.tweets.service import TweetService
            self._tweet_service = TweetService(
                repository=self.tweet_repository,
                pipeline=self.pipeline,
                guard=self.guard,
            )
        return self._tweet_service

    async def aclose(self) -> None:
        """Release network resources held by the container."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db: "Optional[Client]" = None
        self._guard: "Optional[OwnershipGuard]" = None
        self._user_repository: "Optional[IUserRepository]" = None
        self._tweet_repository: "Optional[ITweetRepository]" = None
        self._auth_service: "Optional[IAuthService]" = None
        self._user_service: "Optional[IUserService]" = None
        self._http_client: Optional[httpx.AsyncClient] = None
        self._directory: "Optional[IUserDirectory]" = None
        self._pipeline: "Optional[EnrichmentPipeline]" = None
        self._tweet_service: "Optional[ITweetService]" = None


def get_container(request: Request) -> ServiceContainer:
    """
    Get the service container of the app handling this request.

    create_app builds one container per app from the settings it was
    given, so every service sees the same configuration as the app.
    """
    return request.app.state.container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_user_service(container: ServiceContainer = Depends(get_container)) -> "IUserService":
    """FastAPI dependency for user service."""
    return container.users


def get_tweet_service(container: ServiceContainer = Depends(get_container)) -> "ITweetService":
    """FastAPI dependency for tweet service."""
    return container.tweets

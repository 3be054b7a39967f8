"""
Chirper API package.

Provides the FastAPI application for the identity and posting services.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]

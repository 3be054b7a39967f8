"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    This model is populated from verified token claims and made available
    to route handlers via dependency injection. The core trusts whatever
    identity it is handed here; verifying it is the auth module's job.
    """

    id: str = Field(..., description="User ID (token subject)")
    username: str = Field(..., description="Username at token issue time")
    email: str = Field(..., description="Email at token issue time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

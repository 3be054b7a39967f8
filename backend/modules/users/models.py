"""
Users module data models.

UserRecord is the stored row and is the only model that carries the
password hash. Everything returned to clients is a UserProfile.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


BIO_MAX_LENGTH = 500


class UserProfile(BaseModel):
    """Public user profile. Never carries credentials."""

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="Unique email address")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    bio: Optional[str] = Field(None, description="Short biography")
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class UserRecord(UserProfile):
    """A user row as persisted, including the password hash."""

    password_hash: str = Field(..., repr=False)

    def to_profile(self) -> UserProfile:
        """Strip credentials for anything leaving the service."""
        return UserProfile(**self.model_dump(exclude={"password_hash"}))


class UpdateUserRequest(BaseModel):
    """Partial profile update. Omitted fields are left untouched."""

    model_config = {"extra": "forbid"}

    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=BIO_MAX_LENGTH)

    def changes(self) -> dict:
        """
        Only the fields the caller actually sent with a value.

        An explicit null means "leave unchanged"; username and email are
        NOT NULL columns and must never be written as None.
        """
        return self.model_dump(exclude_unset=True, exclude_none=True)

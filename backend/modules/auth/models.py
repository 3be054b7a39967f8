"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field, EmailStr, field_validator

from modules.users.models import UserProfile


# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


class TokenClaims(BaseModel):
    """
    Decoded bearer token payload.

    The only state carried across service boundaries to prove identity.
    """

    sub: str = Field(..., description="Subject (user ID)")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True}


class RegisterRequest(BaseModel):
    """Registration payload."""

    model_config = {"extra": "forbid"}

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """Login payload."""

    model_config = {"extra": "forbid"}

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Returned after registration or login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Seconds until the token expires")
    user: UserProfile

"""
Auth API endpoints.

Registration and login. Both return a bearer token and the public profile.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new user.

    Fails with 409 if the username or email is already taken.
    """
    return await service.register(request)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a bearer token.
    """
    return await service.login(request)

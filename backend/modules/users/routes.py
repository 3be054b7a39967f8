"""
User profile endpoints.

All endpoints require authentication. Only the profile owner may update or
delete it. ``GET /users/{id}`` is also what the posting service calls to
resolve tweet authors.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UserProfile, UpdateUserRequest

router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Get the current user's profile.
    """
    return await service.get_user(user.id)


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    return await service.get_user(user_id)


@router.put("/{user_id}", response_model=UserProfile)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Update a profile. 404 if it does not exist, 403 if it is not yours,
    409 if the new username or email is taken.
    """
    return await service.update_user(user_id, request, user.id)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> dict[str, str]:
    """
    Delete a profile. 404 if it does not exist, 403 if it is not yours.
    """
    await service.delete_user(user_id, user.id)
    return {"message": "User deleted successfully"}

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from giftem.dependencies import get_user_service
from giftem.models.api.users import UserResponse
from giftem.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """List every known user."""
    return service.list_users()


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get the locally active user."""
    user = service.get_current_user()
    if user is None:
        raise HTTPException(status_code=404, detail="No current user")
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, service: UserService = Depends(get_user_service)
) -> UserResponse:
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/{user_id}/follow", response_model=UserResponse)
async def follow_user(
    user_id: UUID, service: UserService = Depends(get_user_service)
) -> UserResponse:
    """Follow a user as the current user."""
    user = await service.follow_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user

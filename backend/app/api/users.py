"""
User REST API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_container
from app.api.schemas import UserResponse, WishlistResponse
from app.container import Container

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(container: Container = Depends(get_container)):
    return await container.get_all_users.execute()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, container: Container = Depends(get_container)):
    user = await container.get_user.execute(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/{user_id}/wishlists", response_model=List[WishlistResponse])
async def list_user_wishlists(user_id: str, container: Container = Depends(get_container)):
    """Wishlists owned by a user (empty for unknown users)"""
    return await container.get_user_wishlists.execute(user_id)

"""
Wishlist REST API endpoints
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_container
from app.api.schemas import (
    AddItemRequest,
    CreateWishlistRequest,
    MoveItemsRequest,
    MoveItemsResponse,
    UpdateWishlistRequest,
    WishlistResponse,
)
from app.container import Container

router = APIRouter(prefix="/api/wishlists", tags=["wishlists"])


@router.get("", response_model=List[WishlistResponse])
async def list_wishlists(container: Container = Depends(get_container)):
    """List every wishlist"""
    return await container.get_all_wishlists.execute()


@router.post("", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
async def create_wishlist(
    request: CreateWishlistRequest,
    container: Container = Depends(get_container),
):
    """Create a wishlist for an existing user"""
    return await container.create_wishlist.execute(
        user_id=request.user_id,
        name=request.name,
        description=request.description,
        is_default=request.is_default,
    )


@router.post("/move-items", response_model=MoveItemsResponse)
async def move_items(
    request: MoveItemsRequest,
    container: Container = Depends(get_container),
):
    """Move items from one wishlist to another, all or nothing"""
    result = await container.move_items.execute(
        request.source_list_id,
        request.destination_list_id,
        request.item_ids,
    )
    return MoveItemsResponse(
        source=WishlistResponse.model_validate(result.source),
        destination=WishlistResponse.model_validate(result.destination),
    )


@router.get("/{wishlist_id}", response_model=WishlistResponse)
async def get_wishlist(wishlist_id: str, container: Container = Depends(get_container)):
    """Get a single wishlist by ID"""
    wishlist = await container.get_wishlist.execute(wishlist_id)
    if wishlist is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Wishlist not found"
        )
    return wishlist


@router.put("/{wishlist_id}", response_model=WishlistResponse)
async def update_wishlist(
    wishlist_id: str,
    request: UpdateWishlistRequest,
    container: Container = Depends(get_container),
):
    """Update a wishlist"""
    return await container.update_wishlist.execute(
        wishlist_id,
        name=request.name,
        description=request.description,
        is_default=request.is_default,
    )


@router.put("/{wishlist_id}/default", response_model=WishlistResponse)
async def set_default_wishlist(wishlist_id: str, container: Container = Depends(get_container)):
    """Make this the user's default wishlist"""
    return await container.set_default_wishlist.execute(wishlist_id)


@router.delete("/{wishlist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_wishlist(wishlist_id: str, container: Container = Depends(get_container)):
    """Delete a wishlist; unknown IDs are ignored"""
    await container.delete_wishlist.execute(wishlist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{wishlist_id}/items", response_model=WishlistResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    wishlist_id: str,
    request: AddItemRequest,
    container: Container = Depends(get_container),
):
    """Add a product to a wishlist"""
    return await container.add_item.execute(
        wishlist_id,
        product_id=request.product_id,
        product_name=request.product_name,
        product_url=request.product_url,
        price=request.price,
        priority=request.priority,
        notes=request.notes,
        currency=request.currency,
        thumbnail=request.thumbnail,
    )


@router.delete("/{wishlist_id}/items/{item_id}", response_model=WishlistResponse)
async def remove_item(
    wishlist_id: str,
    item_id: str,
    container: Container = Depends(get_container),
):
    """Remove an item from a wishlist; unknown item IDs are ignored"""
    return await container.remove_item.execute(wishlist_id, item_id)

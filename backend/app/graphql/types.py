"""
GraphQL Types using Strawberry
Converts domain entities to GraphQL types
"""
import strawberry
from typing import List
from datetime import datetime
from decimal import Decimal
from strawberry.types import Info

from app.domain.entities import Priority, User, Wishlist, WishlistItem

PriorityEnum = strawberry.enum(Priority, name="Priority")


@strawberry.type
class WishlistItemType:
    """GraphQL type for WishlistItem"""
    id: str
    wishlist_id: str
    product_id: str
    product_name: str
    product_url: str
    price: Decimal
    priority: PriorityEnum
    notes: str
    currency: str
    thumbnail: str
    added_at: datetime


@strawberry.type
class WishlistType:
    """GraphQL type for Wishlist"""
    id: str
    user_id: str
    name: str
    description: str
    items: List[WishlistItemType]
    is_default: bool
    created_at: datetime
    updated_at: datetime


@strawberry.type
class UserType:
    """GraphQL type for User, with the user's wishlists resolved on demand"""
    id: str
    email: str
    name: str
    created_at: datetime

    @strawberry.field
    async def wishlists(self, info: Info) -> List[WishlistType]:
        container = info.context["container"]
        wishlists = await container.get_user_wishlists.execute(self.id)
        return [wishlist_from_entity(w) for w in wishlists]


@strawberry.type
class MoveItemsPayload:
    """Both wishlists after a move"""
    source: WishlistType
    destination: WishlistType


def item_from_entity(item: WishlistItem) -> WishlistItemType:
    return WishlistItemType(
        id=item.id,
        wishlist_id=item.wishlist_id,
        product_id=item.product_id,
        product_name=item.product_name,
        product_url=item.product_url,
        price=item.price,
        priority=item.priority,
        notes=item.notes,
        currency=item.currency,
        thumbnail=item.thumbnail,
        added_at=item.added_at,
    )


def wishlist_from_entity(wishlist: Wishlist) -> WishlistType:
    """Convert a Wishlist entity (and its items) to the GraphQL type"""
    return WishlistType(
        id=wishlist.id,
        user_id=wishlist.user_id,
        name=wishlist.name,
        description=wishlist.description,
        items=[item_from_entity(item) for item in wishlist.items],
        is_default=wishlist.is_default,
        created_at=wishlist.created_at,
        updated_at=wishlist.updated_at,
    )


def user_from_entity(user: User) -> UserType:
    return UserType(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
    )

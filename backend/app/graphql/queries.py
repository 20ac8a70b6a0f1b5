"""
GraphQL Queries
Define all read operations for the API
"""
import strawberry
from typing import List, Optional
from strawberry.types import Info

from app.graphql.types import (
    UserType,
    WishlistType,
    user_from_entity,
    wishlist_from_entity,
)


@strawberry.type
class Query:
    @strawberry.field
    async def wishlists(self, info: Info) -> List[WishlistType]:
        """All wishlists"""
        container = info.context["container"]
        return [wishlist_from_entity(w) for w in await container.get_all_wishlists.execute()]

    @strawberry.field
    async def wishlist(self, info: Info, id: str) -> Optional[WishlistType]:
        """A single wishlist, or null if it does not exist"""
        container = info.context["container"]
        wishlist = await container.get_wishlist.execute(id)
        return wishlist_from_entity(wishlist) if wishlist else None

    @strawberry.field
    async def users(self, info: Info) -> List[UserType]:
        container = info.context["container"]
        return [user_from_entity(u) for u in await container.get_all_users.execute()]

    @strawberry.field
    async def user(self, info: Info, id: str) -> Optional[UserType]:
        container = info.context["container"]
        user = await container.get_user.execute(id)
        return user_from_entity(user) if user else None

    @strawberry.field
    async def user_wishlists(self, info: Info, user_id: str) -> List[WishlistType]:
        """Wishlists owned by a user"""
        container = info.context["container"]
        wishlists = await container.get_user_wishlists.execute(user_id)
        return [wishlist_from_entity(w) for w in wishlists]

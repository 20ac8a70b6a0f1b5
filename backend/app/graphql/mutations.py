"""
GraphQL Mutations
Define all write operations for the API
"""
import strawberry
from decimal import Decimal
from typing import List, Optional
from strawberry.types import Info

from app.domain.entities import Priority
from app.domain.exceptions import DomainError
from app.graphql.errors import to_graphql_error
from app.graphql.types import (
    MoveItemsPayload,
    PriorityEnum,
    WishlistType,
    wishlist_from_entity,
)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_wishlist(
        self,
        info: Info,
        user_id: str,
        name: str,
        description: str = "",
        is_default: bool = False,
    ) -> WishlistType:
        """
        Create a wishlist for a user.

        Args:
            user_id: Owner of the new wishlist
            name: Unique (case-insensitive) among the user's wishlists
            is_default: Make it the user's default wishlist
        """
        container = info.context["container"]
        try:
            wishlist = await container.create_wishlist.execute(
                user_id, name, description, is_default=is_default
            )
        except DomainError as e:
            raise to_graphql_error(e)
        return wishlist_from_entity(wishlist)

    @strawberry.mutation
    async def update_wishlist(
        self,
        info: Info,
        id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        is_default: Optional[bool] = None,
    ) -> WishlistType:
        container = info.context["container"]
        try:
            wishlist = await container.update_wishlist.execute(
                id, name=name, description=description, is_default=is_default
            )
        except DomainError as e:
            raise to_graphql_error(e)
        return wishlist_from_entity(wishlist)

    @strawberry.mutation
    async def set_default_wishlist(self, info: Info, id: str) -> WishlistType:
        container = info.context["container"]
        try:
            wishlist = await container.set_default_wishlist.execute(id)
        except DomainError as e:
            raise to_graphql_error(e)
        return wishlist_from_entity(wishlist)

    @strawberry.mutation
    async def delete_wishlist(self, info: Info, id: str) -> bool:
        """Always true; deleting an unknown wishlist is not an error"""
        container = info.context["container"]
        await container.delete_wishlist.execute(id)
        return True

    @strawberry.mutation
    async def add_item_to_wishlist(
        self,
        info: Info,
        wishlist_id: str,
        product_id: str,
        product_name: str,
        price: Decimal,
        product_url: str = "",
        priority: PriorityEnum = Priority.MEDIUM,
        notes: str = "",
        currency: Optional[str] = None,
        thumbnail: str = "",
    ) -> WishlistType:
        """
        Add a product to a wishlist.

        Args:
            currency: ISO 4217 code, defaults to EUR
            thumbnail: Base64-encoded image, defaults to empty
        """
        container = info.context["container"]
        try:
            wishlist = await container.add_item.execute(
                wishlist_id,
                product_id=product_id,
                product_name=product_name,
                product_url=product_url,
                price=price,
                priority=priority,
                notes=notes,
                currency=currency,
                thumbnail=thumbnail,
            )
        except DomainError as e:
            raise to_graphql_error(e)
        return wishlist_from_entity(wishlist)

    @strawberry.mutation
    async def remove_item_from_wishlist(
        self,
        info: Info,
        wishlist_id: str,
        item_id: str,
    ) -> WishlistType:
        container = info.context["container"]
        try:
            wishlist = await container.remove_item.execute(wishlist_id, item_id)
        except DomainError as e:
            raise to_graphql_error(e)
        return wishlist_from_entity(wishlist)

    @strawberry.mutation
    async def move_items(
        self,
        info: Info,
        source_list_id: str,
        destination_list_id: str,
        item_ids: List[str],
    ) -> MoveItemsPayload:
        """Move items between wishlists; fails without changes if any item is missing"""
        container = info.context["container"]
        try:
            result = await container.move_items.execute(source_list_id, destination_list_id, item_ids)
        except DomainError as e:
            raise to_graphql_error(e)
        return MoveItemsPayload(
            source=wishlist_from_entity(result.source),
            destination=wishlist_from_entity(result.destination),
        )

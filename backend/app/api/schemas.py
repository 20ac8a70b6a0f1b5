"""
Request and response bodies for the REST API (camelCase on the wire)
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from app.domain.entities import Priority

# Prices travel as JSON numbers
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class WishlistItemResponse(CamelModel):
    id: str
    wishlist_id: str
    product_id: str
    product_name: str
    product_url: str
    price: Price
    priority: Priority
    notes: str
    currency: str
    thumbnail: str
    added_at: datetime


class WishlistResponse(CamelModel):
    id: str
    user_id: str
    name: str
    description: str
    items: List[WishlistItemResponse]
    is_default: bool
    created_at: datetime
    updated_at: datetime


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    created_at: datetime


class CreateWishlistRequest(CamelModel):
    """Request body for creating a wishlist"""
    user_id: str
    name: Annotated[str, Field(min_length=1, max_length=200)]
    description: str = ""
    is_default: bool = False


class UpdateWishlistRequest(CamelModel):
    """Request body for updating a wishlist; omitted fields stay unchanged"""
    name: Annotated[Optional[str], Field(min_length=1, max_length=200)] = None
    description: Optional[str] = None
    is_default: Optional[bool] = None


class AddItemRequest(CamelModel):
    """Request body for adding an item to a wishlist"""
    product_id: str
    product_name: str
    product_url: str = ""
    price: Annotated[Decimal, Field(ge=0)]
    priority: Priority = Priority.MEDIUM
    notes: Optional[str] = ""
    # Empty or null falls back to the configured default currency (EUR)
    currency: Annotated[Optional[str], Field(max_length=3)] = None
    # Base64 image; empty or null means none
    thumbnail: Optional[str] = None


class MoveItemsRequest(CamelModel):
    source_list_id: str
    destination_list_id: str
    item_ids: List[str]


class MoveItemsResponse(CamelModel):
    source: WishlistResponse
    destination: WishlistResponse

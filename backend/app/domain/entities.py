"""
Immutable wishlist entities

Entities are frozen dataclasses. Every mutating method returns a new value
with a refreshed ``updated_at``; the receiver is never changed.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Tuple
import uuid

from app.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "EUR"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id(prefix: str) -> str:
    """Opaque unique identifier, e.g. ``wl_3f2a...``"""
    return f"{prefix}_{uuid.uuid4().hex}"


def _require_id(value: str, label: str) -> None:
    if not value or not str(value).strip():
        raise ValidationError(f"{label} cannot be empty")


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str
    created_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        _require_id(self.id, "User ID")


@dataclass(frozen=True)
class WishlistItem:
    """A product entry owned by exactly one wishlist"""
    id: str
    wishlist_id: str
    product_id: str
    product_name: str
    product_url: str
    price: Decimal
    priority: Priority = Priority.MEDIUM
    notes: str = ""
    currency: str = DEFAULT_CURRENCY
    thumbnail: str = ""
    added_at: datetime = field(default_factory=utcnow)

    def __post_init__(self):
        _require_id(self.id, "Wishlist item ID")
        _require_id(self.wishlist_id, "Wishlist ID")

        try:
            price = self.price if isinstance(self.price, Decimal) else Decimal(str(self.price))
        except (InvalidOperation, ValueError):
            raise ValidationError(f"Invalid price: {self.price!r}")
        if not price.is_finite() or price < 0:
            raise ValidationError(f"Price must be a non-negative amount, got {self.price}")
        object.__setattr__(self, "price", price)

        try:
            object.__setattr__(self, "priority", Priority(self.priority))
        except ValueError:
            raise ValidationError(f"Unknown priority: {self.priority!r}")

        if not self.currency:
            object.__setattr__(self, "currency", DEFAULT_CURRENCY)
        if self.thumbnail is None:
            object.__setattr__(self, "thumbnail", "")

    def move_to(self, wishlist_id: str) -> "WishlistItem":
        """Copy of this item re-pointed at another wishlist, ``added_at`` preserved"""
        return replace(self, wishlist_id=wishlist_id)


@dataclass(frozen=True)
class Wishlist:
    """A named, user-owned ordered collection of items"""
    id: str
    user_id: str
    name: str
    description: str = ""
    items: Tuple[WishlistItem, ...] = ()
    is_default: bool = False
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        _require_id(self.id, "Wishlist ID")
        _require_id(self.user_id, "User ID")
        if not self.name or not self.name.strip():
            raise ValidationError("Wishlist name cannot be empty")

        items = tuple(self.items)
        seen = set()
        for item in items:
            if item.id in seen:
                raise ValidationError(f"Duplicate item {item.id} in wishlist {self.id}")
            seen.add(item.id)
        object.__setattr__(self, "items", items)

        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)
        elif self.updated_at < self.created_at:
            raise ValidationError("updated_at cannot be earlier than created_at")

    def _touch(self, **changes) -> "Wishlist":
        # Clamp so updated_at never falls behind created_at on clock skew
        now = max(utcnow(), self.created_at)
        return replace(self, updated_at=now, **changes)

    def has_item(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self.items)

    def find_item(self, item_id: str) -> Optional[WishlistItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def add_item(self, item: WishlistItem) -> "Wishlist":
        if self.has_item(item.id):
            raise ValidationError(f"Item {item.id} is already in wishlist {self.id}")
        return self._touch(items=self.items + (item,))

    def remove_item(self, item_id: str) -> "Wishlist":
        """Drop ``item_id``; an unknown id leaves the items as they are"""
        return self._touch(items=tuple(item for item in self.items if item.id != item_id))

    def update(self, name: str, description: str) -> "Wishlist":
        return self._touch(name=name, description=description)

    def set_default(self, is_default: bool = True) -> "Wishlist":
        return self._touch(is_default=is_default)

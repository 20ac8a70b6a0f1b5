from app.domain.entities import Priority, User, Wishlist, WishlistItem
from app.domain.exceptions import (
    ConflictError,
    DomainError,
    DuplicateWishlistNameError,
    NotFoundError,
    UserNotFoundError,
    ValidationError,
    WishlistItemNotFoundError,
    WishlistNotFoundError,
)
from app.domain.ports import UserRepository, WishlistChanges, WishlistRepository

__all__ = [
    "Priority",
    "User",
    "Wishlist",
    "WishlistItem",
    "ConflictError",
    "DomainError",
    "DuplicateWishlistNameError",
    "NotFoundError",
    "UserNotFoundError",
    "ValidationError",
    "WishlistItemNotFoundError",
    "WishlistNotFoundError",
    "UserRepository",
    "WishlistChanges",
    "WishlistRepository",
]

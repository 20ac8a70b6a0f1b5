"""
Domain errors raised by entities and use cases
"""
from typing import Iterable, List


class DomainError(Exception):
    """Base class for every failure raised by the wishlist core"""


class ValidationError(DomainError):
    """An entity was constructed with malformed identity or values"""


class NotFoundError(DomainError):
    """A referenced entity does not exist"""


class ConflictError(DomainError):
    """The operation would break a uniqueness invariant"""


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class WishlistNotFoundError(NotFoundError):
    def __init__(self, wishlist_id: str):
        self.wishlist_id = wishlist_id
        super().__init__(f"Wishlist with id {wishlist_id} not found")


class WishlistItemNotFoundError(NotFoundError):
    def __init__(self, item_ids: Iterable[str]):
        self.item_ids: List[str] = list(item_ids)
        super().__init__(f"Items not found in source wishlist: {', '.join(self.item_ids)}")


class DuplicateWishlistNameError(ConflictError):
    def __init__(self, name: str, user_id: str):
        self.name = name
        self.user_id = user_id
        super().__init__(f"A wishlist named '{name}' already exists for user {user_id}")

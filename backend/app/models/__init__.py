from app.models.user import UserRecord
from app.models.wishlist import WishlistRecord, WishlistItemRecord

__all__ = [
    "UserRecord",
    "WishlistRecord",
    "WishlistItemRecord",
]

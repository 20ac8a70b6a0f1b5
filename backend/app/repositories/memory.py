"""
In-memory repositories

Each store is a plain dict keyed by id and guarded by a re-entrant lock so
it can be shared between threads as well as coroutines. Instances are
created by the container, never at import time.
"""
import logging
import threading
from typing import Dict, List, Optional

from app.domain.entities import User, Wishlist
from app.domain.ports import UserRepository, WishlistChanges, WishlistRepository

logger = logging.getLogger(__name__)


def _clear_defaults(store: Dict[str, Wishlist], user_id: str) -> None:
    for wishlist_id, wishlist in list(store.items()):
        if wishlist.user_id == user_id and wishlist.is_default:
            store[wishlist_id] = wishlist.set_default(False)


class InMemoryWishlistRepository(WishlistRepository):
    def __init__(self):
        self._wishlists: Dict[str, Wishlist] = {}
        self._lock = threading.RLock()

    async def find_by_id(self, wishlist_id: str) -> Optional[Wishlist]:
        with self._lock:
            return self._wishlists.get(wishlist_id)

    async def find_by_user_id(self, user_id: str) -> List[Wishlist]:
        with self._lock:
            return [w for w in self._wishlists.values() if w.user_id == user_id]

    async def find_by_user_id_and_name(self, user_id: str, name: str) -> Optional[Wishlist]:
        wanted = name.casefold()
        with self._lock:
            for wishlist in self._wishlists.values():
                if wishlist.user_id == user_id and wishlist.name.casefold() == wanted:
                    return wishlist
        return None

    async def find_all(self) -> List[Wishlist]:
        with self._lock:
            return list(self._wishlists.values())

    async def save(self, wishlist: Wishlist) -> Wishlist:
        with self._lock:
            self._wishlists[wishlist.id] = wishlist
        logger.debug("Saved wishlist %s", wishlist.id)
        return wishlist

    async def delete(self, wishlist_id: str) -> None:
        with self._lock:
            self._wishlists.pop(wishlist_id, None)

    async def clear_default_for_user(self, user_id: str) -> None:
        with self._lock:
            _clear_defaults(self._wishlists, user_id)

    async def commit(self, changes: WishlistChanges) -> None:
        with self._lock:
            # Apply to a copy and swap, so a failing operation leaves the store untouched
            staged = dict(self._wishlists)
            for operation, target in changes.operations:
                if operation == WishlistChanges.SAVE:
                    staged[target.id] = target
                elif operation == WishlistChanges.DELETE:
                    staged.pop(target, None)
                elif operation == WishlistChanges.CLEAR_DEFAULT:
                    _clear_defaults(staged, target)
                else:
                    raise ValueError(f"Unknown wishlist operation: {operation}")
            self._wishlists = staged
        logger.debug("Committed %d wishlist operation(s)", len(changes))

    async def clear(self) -> None:
        with self._lock:
            self._wishlists.clear()


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.RLock()

    async def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    async def find_all(self) -> List[User]:
        with self._lock:
            return list(self._users.values())

    async def save(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user
        return user

    async def clear(self) -> None:
        with self._lock:
            self._users.clear()

"""
Repository ports consumed by the use-case layer
"""
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Tuple

from app.domain.entities import User, Wishlist


class WishlistChanges:
    """Pending wishlist writes, applied in order by ``WishlistRepository.commit``"""

    SAVE = "save"
    DELETE = "delete"
    CLEAR_DEFAULT = "clear_default"

    def __init__(self):
        self.operations: List[Tuple[str, object]] = []

    def save(self, wishlist: Wishlist) -> Wishlist:
        self.operations.append((self.SAVE, wishlist))
        return wishlist

    def delete(self, wishlist_id: str) -> None:
        self.operations.append((self.DELETE, wishlist_id))

    def clear_default_for_user(self, user_id: str) -> None:
        self.operations.append((self.CLEAR_DEFAULT, user_id))

    def __len__(self) -> int:
        return len(self.operations)


class WishlistRepository(ABC):
    @abstractmethod
    async def find_by_id(self, wishlist_id: str) -> Optional[Wishlist]:
        ...

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Wishlist]:
        ...

    @abstractmethod
    async def find_by_user_id_and_name(self, user_id: str, name: str) -> Optional[Wishlist]:
        """Case-insensitive name lookup within one user's wishlists"""

    @abstractmethod
    async def find_all(self) -> List[Wishlist]:
        ...

    @abstractmethod
    async def save(self, wishlist: Wishlist) -> Wishlist:
        """Insert or replace by id"""

    @abstractmethod
    async def delete(self, wishlist_id: str) -> None:
        """Remove a wishlist and its items; absent ids are ignored"""

    @abstractmethod
    async def clear_default_for_user(self, user_id: str) -> None:
        ...

    @abstractmethod
    async def commit(self, changes: WishlistChanges) -> None:
        """Apply every operation in ``changes`` as one atomic write"""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every wishlist"""

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[WishlistChanges]:
        """
        Collect writes and commit them together when the block exits.

        Nothing is written if the block raises.
        """
        changes = WishlistChanges()
        yield changes
        if changes:
            await self.commit(changes)


class UserRepository(ABC):
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        ...

    @abstractmethod
    async def save(self, user: User) -> User:
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Drop every user"""

"""
Dependency container

Owns the repositories and use cases of one application instance. Built by
``create_app`` and stored on ``app.state``; nothing here is module-global.
"""
import logging
from typing import Optional

from app.config import Settings
from app.database import Database
from app.domain.ports import UserRepository, WishlistRepository
from app.repositories import (
    InMemoryUserRepository,
    InMemoryWishlistRepository,
    SqlUserRepository,
    SqlWishlistRepository,
)
from app.repositories.seed import seed_demo_data
from app.services.users import GetAllUsersUseCase, GetUserByIdUseCase
from app.services.wishlists import (
    AddItemToWishlistUseCase,
    CreateWishlistUseCase,
    DeleteWishlistUseCase,
    GetAllWishlistsUseCase,
    GetWishlistByIdUseCase,
    GetWishlistsByUserUseCase,
    MoveItemsUseCase,
    RemoveItemFromWishlistUseCase,
    SetDefaultWishlistUseCase,
    UpdateWishlistUseCase,
)

logger = logging.getLogger(__name__)


class Container:
    def __init__(
        self,
        settings: Settings,
        wishlist_repo: Optional[WishlistRepository] = None,
        user_repo: Optional[UserRepository] = None,
    ):
        self.settings = settings
        self.database: Optional[Database] = None

        if wishlist_repo is None or user_repo is None:
            if settings.storage_backend == "sql":
                self.database = Database(settings.database_url, echo=settings.debug)
                wishlist_repo = wishlist_repo or SqlWishlistRepository(self.database)
                user_repo = user_repo or SqlUserRepository(self.database)
            else:
                wishlist_repo = wishlist_repo or InMemoryWishlistRepository()
                user_repo = user_repo or InMemoryUserRepository()

        self.wishlist_repo = wishlist_repo
        self.user_repo = user_repo

        # Use cases
        self.create_wishlist = CreateWishlistUseCase(wishlist_repo, user_repo)
        self.update_wishlist = UpdateWishlistUseCase(wishlist_repo)
        self.set_default_wishlist = SetDefaultWishlistUseCase(wishlist_repo)
        self.delete_wishlist = DeleteWishlistUseCase(wishlist_repo)
        self.add_item = AddItemToWishlistUseCase(wishlist_repo, settings.default_currency)
        self.remove_item = RemoveItemFromWishlistUseCase(wishlist_repo)
        self.move_items = MoveItemsUseCase(wishlist_repo)
        self.get_wishlist = GetWishlistByIdUseCase(wishlist_repo)
        self.get_all_wishlists = GetAllWishlistsUseCase(wishlist_repo)
        self.get_user_wishlists = GetWishlistsByUserUseCase(wishlist_repo)
        self.get_all_users = GetAllUsersUseCase(user_repo)
        self.get_user = GetUserByIdUseCase(user_repo)

    async def startup(self):
        """Create tables when using SQL and load demo data if enabled"""
        if self.database is not None:
            await self.database.create_all()
            logger.info("Database initialized")

        if self.settings.seed_demo_data:
            await seed_demo_data(self.user_repo, self.wishlist_repo)

    async def shutdown(self):
        """Clear in-process stores and release the engine"""
        if self.database is None:
            await self.wishlist_repo.clear()
            await self.user_repo.clear()
        else:
            await self.database.dispose()
            logger.info("Database connections closed")

from app.repositories.memory import InMemoryUserRepository, InMemoryWishlistRepository
from app.repositories.sql import SqlUserRepository, SqlWishlistRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryWishlistRepository",
    "SqlUserRepository",
    "SqlWishlistRepository",
]

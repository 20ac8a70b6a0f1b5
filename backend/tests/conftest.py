import pytest
from datetime import datetime, timezone
from decimal import Decimal
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.container import Container
from app.database import Database
from app.domain.entities import Priority, User, Wishlist, WishlistItem
from app.main import create_app
from app.repositories import (
    InMemoryUserRepository,
    InMemoryWishlistRepository,
    SqlUserRepository,
    SqlWishlistRepository,
)

JAN_1 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def make_item(item_id: str, wishlist_id: str, **overrides) -> WishlistItem:
    """Build an item with an old timestamp"""
    fields = dict(
        id=item_id,
        wishlist_id=wishlist_id,
        product_id=f"prod_{item_id}",
        product_name=f"Product {item_id}",
        product_url=f"https://example.com/{item_id}",
        price=Decimal("10.00"),
        priority=Priority.MEDIUM,
        notes="",
        added_at=JAN_1,
    )
    fields.update(overrides)
    return WishlistItem(**fields)


def make_wishlist(wishlist_id: str, user_id: str = "user_1", **overrides) -> Wishlist:
    """Build a wishlist created (and last updated) on 2025-01-01"""
    fields = dict(
        id=wishlist_id,
        user_id=user_id,
        name=f"List {wishlist_id}",
        description="",
        items=(),
        is_default=False,
        created_at=JAN_1,
        updated_at=JAN_1,
    )
    fields.update(overrides)
    return Wishlist(**fields)


@pytest.fixture
def settings() -> Settings:
    """In-memory settings without demo data or .env influence"""
    return Settings(_env_file=None, storage_backend="memory", seed_demo_data=False)


@pytest.fixture
def wishlist_repo() -> InMemoryWishlistRepository:
    return InMemoryWishlistRepository()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
async def test_user(user_repo) -> User:
    """Create a test user"""
    return await user_repo.save(User("user_1", "john@example.com", "John Doe", JAN_1))


@pytest.fixture
async def other_user(user_repo) -> User:
    return await user_repo.save(User("user_2", "jane@example.com", "Jane Smith", JAN_1))


@pytest.fixture
def container(settings, wishlist_repo, user_repo) -> Container:
    return Container(settings, wishlist_repo=wishlist_repo, user_repo=user_repo)


@pytest.fixture
async def client(settings, container) -> AsyncGenerator:
    """Create async HTTP client for testing"""
    app = create_app(settings, container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator:
    """Fresh SQLite database file per test"""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'wishlists.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture(params=["memory", "sql"])
async def repositories(request, tmp_path):
    """(wishlist_repo, user_repo) for each storage backend"""
    if request.param == "memory":
        yield InMemoryWishlistRepository(), InMemoryUserRepository()
        return

    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'contract.db'}")
    await db.create_all()
    yield SqlWishlistRepository(db), SqlUserRepository(db)
    await db.dispose()

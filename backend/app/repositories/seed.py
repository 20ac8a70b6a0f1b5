"""
Demo users and wishlists loaded at startup when ``seed_demo_data`` is on
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal

from app.domain.entities import Priority, User, Wishlist, WishlistItem
from app.domain.ports import UserRepository, WishlistRepository

logger = logging.getLogger(__name__)


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEMO_USERS = [
    User("user_1", "john@example.com", "John Doe", _date(2024, 12, 1)),
    User("user_2", "jane@example.com", "Jane Smith", _date(2024, 12, 15)),
    User("user_3", "bob@example.com", "Bob Wilson", _date(2025, 1, 5)),
]


def demo_wishlists():
    keyboard = WishlistItem(
        id="item_1",
        wishlist_id="wl_1",
        product_id="prod_1",
        product_name="Mechanical Keyboard",
        product_url="https://example.com/keyboard",
        price=Decimal("150.00"),
        priority=Priority.HIGH,
        notes="Need for gaming setup",
        added_at=_date(2025, 1, 15),
    )
    mouse = WishlistItem(
        id="item_2",
        wishlist_id="wl_1",
        product_id="prod_2",
        product_name="Ergonomic Mouse",
        product_url="https://example.com/mouse",
        price=Decimal("80.00"),
        priority=Priority.MEDIUM,
        notes="For better productivity",
        added_at=_date(2025, 1, 20),
    )
    shoes = WishlistItem(
        id="item_3",
        wishlist_id="wl_2",
        product_id="prod_3",
        product_name="Running Shoes",
        product_url="https://example.com/shoes",
        price=Decimal("120.00"),
        priority=Priority.HIGH,
        notes="For marathon training",
        currency="USD",
        added_at=_date(2025, 2, 1),
    )
    tracker = WishlistItem(
        id="item_4",
        wishlist_id="wl_2",
        product_id="prod_4",
        product_name="Fitness Tracker",
        product_url="https://example.com/tracker",
        price=Decimal("200.00"),
        priority=Priority.MEDIUM,
        notes="Track my progress",
        currency="USD",
        added_at=_date(2025, 2, 5),
    )

    return [
        Wishlist(
            id="wl_1",
            user_id="user_1",
            name="Tech Wishlist",
            description="Gadgets and tech items I want",
            items=(keyboard, mouse),
            is_default=True,
            created_at=_date(2025, 1, 10),
            updated_at=_date(2025, 1, 20),
        ),
        Wishlist(
            id="wl_2",
            user_id="user_1",
            name="Fitness Goals",
            description="Items for my fitness journey",
            items=(shoes, tracker),
            created_at=_date(2025, 2, 1),
            updated_at=_date(2025, 2, 5),
        ),
        Wishlist(
            id="wl_3",
            user_id="user_2",
            name="Home Improvement",
            description="Things for the house",
            created_at=_date(2025, 1, 25),
            updated_at=_date(2025, 1, 25),
        ),
    ]


async def seed_demo_data(user_repo: UserRepository, wishlist_repo: WishlistRepository) -> None:
    if await user_repo.find_all():
        logger.info("Users already present, skipping demo data")
        return

    for user in DEMO_USERS:
        await user_repo.save(user)

    wishlists = demo_wishlists()
    async with wishlist_repo.unit_of_work() as changes:
        for wishlist in wishlists:
            changes.save(wishlist)

    logger.info("Seeded %d users and %d wishlists", len(DEMO_USERS), len(wishlists))

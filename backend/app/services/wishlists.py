"""
Wishlist use cases

Each class wraps one user-facing capability. They fetch what they need,
check invariants, build new immutable values and persist them through the
repository ports.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Sequence

from app.domain.entities import (
    DEFAULT_CURRENCY,
    Priority,
    Wishlist,
    WishlistItem,
    generate_id,
    utcnow,
)
from app.domain.exceptions import (
    DuplicateWishlistNameError,
    UserNotFoundError,
    ValidationError,
    WishlistItemNotFoundError,
    WishlistNotFoundError,
)
from app.domain.ports import UserRepository, WishlistRepository

logger = logging.getLogger(__name__)


async def _get_wishlist_or_raise(repo: WishlistRepository, wishlist_id: str) -> Wishlist:
    wishlist = await repo.find_by_id(wishlist_id)
    if wishlist is None:
        raise WishlistNotFoundError(wishlist_id)
    return wishlist


class CreateWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository, user_repo: UserRepository):
        self.wishlist_repo = wishlist_repo
        self.user_repo = user_repo

    async def execute(
        self,
        user_id: str,
        name: str,
        description: str = "",
        is_default: bool = False,
    ) -> Wishlist:
        """
        Create a wishlist for an existing user.

        Raises:
            UserNotFoundError: if the user does not exist
            DuplicateWishlistNameError: if the user already has a wishlist
                with this name (case-insensitive, surrounding whitespace ignored)
        """
        user = await self.user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        name = name.strip()
        existing = await self.wishlist_repo.find_by_user_id_and_name(user_id, name)
        if existing is not None:
            logger.warning("Rejected duplicate wishlist name %r for user %s", name, user_id)
            raise DuplicateWishlistNameError(name, user_id)

        now = utcnow()
        wishlist = Wishlist(
            id=generate_id("wl"),
            user_id=user_id,
            name=name,
            description=description or "",
            items=(),
            is_default=is_default,
            created_at=now,
            updated_at=now,
        )

        async with self.wishlist_repo.unit_of_work() as changes:
            if is_default:
                changes.clear_default_for_user(user_id)
            changes.save(wishlist)

        logger.info("Created wishlist %s for user %s (default=%s)", wishlist.id, user_id, is_default)
        return wishlist


class UpdateWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(
        self,
        wishlist_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        is_default: Optional[bool] = None,
    ) -> Wishlist:
        """Update name, description or default flag; ``None`` leaves a field unchanged"""
        wishlist = await _get_wishlist_or_raise(self.wishlist_repo, wishlist_id)

        new_name = wishlist.name if name is None else name.strip()
        new_description = wishlist.description if description is None else description

        if new_name.casefold() != wishlist.name.casefold():
            clash = await self.wishlist_repo.find_by_user_id_and_name(wishlist.user_id, new_name)
            if clash is not None and clash.id != wishlist.id:
                logger.warning(
                    "Rejected rename of wishlist %s to duplicate name %r", wishlist_id, new_name
                )
                raise DuplicateWishlistNameError(new_name, wishlist.user_id)

        updated = wishlist.update(new_name, new_description)
        becomes_default = is_default is True and not wishlist.is_default
        if is_default is not None:
            updated = updated.set_default(is_default)

        async with self.wishlist_repo.unit_of_work() as changes:
            if becomes_default:
                changes.clear_default_for_user(wishlist.user_id)
            changes.save(updated)

        if becomes_default:
            logger.info("Wishlist %s is now default for user %s", wishlist_id, wishlist.user_id)
        return updated


class SetDefaultWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self, wishlist_id: str) -> Wishlist:
        wishlist = await _get_wishlist_or_raise(self.wishlist_repo, wishlist_id)
        updated = wishlist.set_default(True)

        async with self.wishlist_repo.unit_of_work() as changes:
            changes.clear_default_for_user(wishlist.user_id)
            changes.save(updated)

        logger.info("Wishlist %s is now default for user %s", wishlist_id, wishlist.user_id)
        return updated


class DeleteWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self, wishlist_id: str) -> None:
        """Idempotent: deleting an unknown id succeeds"""
        await self.wishlist_repo.delete(wishlist_id)
        logger.info("Deleted wishlist %s", wishlist_id)


class AddItemToWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository, default_currency: str = DEFAULT_CURRENCY):
        self.wishlist_repo = wishlist_repo
        self.default_currency = default_currency

    async def execute(
        self,
        wishlist_id: str,
        product_id: str,
        product_name: str,
        product_url: str,
        price: Decimal,
        priority: Priority = Priority.MEDIUM,
        notes: str = "",
        currency: Optional[str] = None,
        thumbnail: Optional[str] = None,
    ) -> Wishlist:
        wishlist = await _get_wishlist_or_raise(self.wishlist_repo, wishlist_id)

        item = WishlistItem(
            id=generate_id("item"),
            wishlist_id=wishlist_id,
            product_id=product_id,
            product_name=product_name,
            product_url=product_url,
            price=price,
            priority=priority,
            notes=notes or "",
            currency=currency or self.default_currency,
            thumbnail=thumbnail or "",
            added_at=utcnow(),
        )

        updated = await self.wishlist_repo.save(wishlist.add_item(item))
        logger.info("Added item %s (%s) to wishlist %s", item.id, product_id, wishlist_id)
        return updated


class RemoveItemFromWishlistUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self, wishlist_id: str, item_id: str) -> Wishlist:
        wishlist = await _get_wishlist_or_raise(self.wishlist_repo, wishlist_id)
        if not wishlist.has_item(item_id):
            logger.debug("Item %s not in wishlist %s, nothing to remove", item_id, wishlist_id)
        return await self.wishlist_repo.save(wishlist.remove_item(item_id))


@dataclass(frozen=True)
class MoveItemsResult:
    source: Wishlist
    destination: Wishlist


class MoveItemsUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(
        self,
        source_list_id: str,
        destination_list_id: str,
        item_ids: Sequence[str],
    ) -> MoveItemsResult:
        """
        Move items between two wishlists, all or nothing.

        Every requested id is checked against the source before anything is
        written. Both lists are then saved in a single unit of work.

        Raises:
            WishlistNotFoundError: if either wishlist is missing
            WishlistItemNotFoundError: listing every id absent from the source
            ValidationError: if source and destination are the same list
        """
        if source_list_id == destination_list_id:
            raise ValidationError("Source and destination wishlists must differ")

        source = await _get_wishlist_or_raise(self.wishlist_repo, source_list_id)
        destination = await _get_wishlist_or_raise(self.wishlist_repo, destination_list_id)

        # Collapse repeats, keep request order
        requested = list(dict.fromkeys(item_ids))
        missing = [item_id for item_id in requested if not source.has_item(item_id)]
        if missing:
            logger.warning(
                "Move from %s to %s aborted, missing items: %s",
                source_list_id, destination_list_id, ", ".join(missing),
            )
            raise WishlistItemNotFoundError(missing)

        if not requested:
            return MoveItemsResult(source=source, destination=destination)

        for item_id in requested:
            item = source.find_item(item_id)
            source = source.remove_item(item_id)
            destination = destination.add_item(item.move_to(destination.id))

        async with self.wishlist_repo.unit_of_work() as changes:
            changes.save(source)
            changes.save(destination)

        logger.info(
            "Moved %d item(s) from wishlist %s to %s",
            len(requested), source_list_id, destination_list_id,
        )
        return MoveItemsResult(source=source, destination=destination)


class GetWishlistByIdUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self, wishlist_id: str) -> Optional[Wishlist]:
        return await self.wishlist_repo.find_by_id(wishlist_id)


class GetAllWishlistsUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self) -> List[Wishlist]:
        return await self.wishlist_repo.find_all()


class GetWishlistsByUserUseCase:
    def __init__(self, wishlist_repo: WishlistRepository):
        self.wishlist_repo = wishlist_repo

    async def execute(self, user_id: str) -> List[Wishlist]:
        return await self.wishlist_repo.find_by_user_id(user_id)

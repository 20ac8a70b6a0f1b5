"""
SQLAlchemy-backed repositories

Every public call runs in its own session and transaction. ``commit``
applies a whole ``WishlistChanges`` batch inside one transaction, so either
all of its writes land or none do.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.database import Database
from app.domain.entities import User, Wishlist, WishlistItem, utcnow
from app.domain.ports import UserRepository, WishlistChanges, WishlistRepository
from app.models import UserRecord, WishlistRecord, WishlistItemRecord

logger = logging.getLogger(__name__)


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def item_from_record(record: WishlistItemRecord) -> WishlistItem:
    return WishlistItem(
        id=record.id,
        wishlist_id=record.wishlist_id,
        product_id=record.product_id,
        product_name=record.product_name,
        product_url=record.product_url or "",
        price=record.price,
        priority=record.priority,
        notes=record.notes or "",
        currency=record.currency,
        thumbnail=record.thumbnail or "",
        added_at=_aware(record.added_at),
    )


def wishlist_from_record(record: WishlistRecord) -> Wishlist:
    return Wishlist(
        id=record.id,
        user_id=record.user_id,
        name=record.name,
        description=record.description or "",
        items=tuple(item_from_record(item) for item in record.items),
        is_default=record.is_default,
        created_at=_aware(record.created_at),
        updated_at=_aware(record.updated_at),
    )


def user_from_record(record: UserRecord) -> User:
    return User(
        id=record.id,
        email=record.email,
        name=record.name,
        created_at=_aware(record.created_at),
    )


class SqlWishlistRepository(WishlistRepository):
    def __init__(self, database: Database):
        self.database = database

    def _select(self):
        return select(WishlistRecord).options(selectinload(WishlistRecord.items))

    async def _fetch_one(self, query) -> Optional[Wishlist]:
        async with self.database.session_maker() as session:
            result = await session.execute(query)
            record = result.scalar_one_or_none()
            return wishlist_from_record(record) if record else None

    async def _fetch_many(self, query) -> List[Wishlist]:
        async with self.database.session_maker() as session:
            result = await session.execute(query)
            return [wishlist_from_record(record) for record in result.scalars().all()]

    async def find_by_id(self, wishlist_id: str) -> Optional[Wishlist]:
        return await self._fetch_one(self._select().where(WishlistRecord.id == wishlist_id))

    async def find_by_user_id(self, user_id: str) -> List[Wishlist]:
        query = (
            self._select()
            .where(WishlistRecord.user_id == user_id)
            .order_by(WishlistRecord.created_at, WishlistRecord.id)
        )
        return await self._fetch_many(query)

    async def find_by_user_id_and_name(self, user_id: str, name: str) -> Optional[Wishlist]:
        # SQLite's lower() only folds ASCII, so names are compared here
        wanted = name.casefold()
        for wishlist in await self.find_by_user_id(user_id):
            if wishlist.name.casefold() == wanted:
                return wishlist
        return None

    async def find_all(self) -> List[Wishlist]:
        return await self._fetch_many(
            self._select().order_by(WishlistRecord.created_at, WishlistRecord.id)
        )

    async def save(self, wishlist: Wishlist) -> Wishlist:
        changes = WishlistChanges()
        changes.save(wishlist)
        await self.commit(changes)
        return wishlist

    async def delete(self, wishlist_id: str) -> None:
        changes = WishlistChanges()
        changes.delete(wishlist_id)
        await self.commit(changes)

    async def clear_default_for_user(self, user_id: str) -> None:
        changes = WishlistChanges()
        changes.clear_default_for_user(user_id)
        await self.commit(changes)

    async def commit(self, changes: WishlistChanges) -> None:
        async with self.database.session_maker() as session:
            async with session.begin():
                for operation, target in changes.operations:
                    if operation == WishlistChanges.SAVE:
                        await self._write(session, target)
                    elif operation == WishlistChanges.DELETE:
                        await self._delete(session, target)
                    elif operation == WishlistChanges.CLEAR_DEFAULT:
                        await self._clear_defaults(session, target)
                    else:
                        raise ValueError(f"Unknown wishlist operation: {operation}")
                    # Flush per operation so an item leaving one list is gone
                    # before it is inserted into another
                    await session.flush()
        logger.debug("Committed %d wishlist operation(s)", len(changes))

    async def _write(self, session: AsyncSession, wishlist: Wishlist) -> None:
        result = await session.execute(self._select().where(WishlistRecord.id == wishlist.id))
        record = result.scalar_one_or_none()
        if record is None:
            record = WishlistRecord(id=wishlist.id, items=[])
            session.add(record)

        record.user_id = wishlist.user_id
        record.name = wishlist.name
        record.description = wishlist.description
        record.is_default = wishlist.is_default
        record.created_at = wishlist.created_at
        record.updated_at = wishlist.updated_at

        existing = {item.id: item for item in record.items}
        item_records = []
        for position, item in enumerate(wishlist.items):
            item_record = existing.get(item.id)
            if item_record is None:
                item_record = await session.get(WishlistItemRecord, item.id)
            if item_record is None:
                item_record = WishlistItemRecord(id=item.id)
            item_record.wishlist_id = wishlist.id
            item_record.position = position
            item_record.product_id = item.product_id
            item_record.product_name = item.product_name
            item_record.product_url = item.product_url
            item_record.price = item.price
            item_record.currency = item.currency
            item_record.priority = item.priority.value
            item_record.notes = item.notes
            item_record.thumbnail = item.thumbnail
            item_record.added_at = item.added_at
            item_records.append(item_record)
        record.items = item_records

    async def _delete(self, session: AsyncSession, wishlist_id: str) -> None:
        await session.execute(delete(WishlistItemRecord).where(WishlistItemRecord.wishlist_id == wishlist_id))
        await session.execute(delete(WishlistRecord).where(WishlistRecord.id == wishlist_id))

    async def _clear_defaults(self, session: AsyncSession, user_id: str) -> None:
        result = await session.execute(
            select(WishlistRecord).where(
                WishlistRecord.user_id == user_id,
                WishlistRecord.is_default.is_(True),
            )
        )
        now = utcnow()
        for record in result.scalars().all():
            record.is_default = False
            record.updated_at = max(now, _aware(record.created_at))

    async def clear(self) -> None:
        async with self.database.session_maker() as session:
            async with session.begin():
                await session.execute(delete(WishlistItemRecord))
                await session.execute(delete(WishlistRecord))


class SqlUserRepository(UserRepository):
    def __init__(self, database: Database):
        self.database = database

    async def find_by_id(self, user_id: str) -> Optional[User]:
        async with self.database.session_maker() as session:
            record = await session.get(UserRecord, user_id)
            return user_from_record(record) if record else None

    async def find_all(self) -> List[User]:
        async with self.database.session_maker() as session:
            result = await session.execute(
                select(UserRecord).order_by(UserRecord.created_at, UserRecord.id)
            )
            return [user_from_record(record) for record in result.scalars().all()]

    async def save(self, user: User) -> User:
        async with self.database.session_maker() as session:
            async with session.begin():
                await session.merge(UserRecord(
                    id=user.id,
                    email=user.email,
                    name=user.name,
                    created_at=user.created_at,
                ))
        return user

    async def clear(self) -> None:
        async with self.database.session_maker() as session:
            async with session.begin():
                await session.execute(delete(UserRecord))

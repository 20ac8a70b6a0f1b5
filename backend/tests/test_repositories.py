"""
Repository contract, run against the in-memory and SQL stores
"""
import asyncio
import pytest
from datetime import timezone
from decimal import Decimal

from app.domain.entities import Priority, User
from app.domain.ports import WishlistChanges
from conftest import JAN_1, make_item, make_wishlist


@pytest.mark.asyncio
async def test_save_and_find_round_trip(repositories):
    wishlist_repo, user_repo = repositories
    await user_repo.save(User("user_1", "john@example.com", "John Doe", JAN_1))
    items = (
        make_item("i1", "wl_1", price=Decimal("150.00"), priority=Priority.HIGH, thumbnail="aW1n"),
        make_item("i2", "wl_1", currency="USD"),
    )
    wishlist = make_wishlist("wl_1", description="Gadgets", items=items, is_default=True)

    await wishlist_repo.save(wishlist)
    found = await wishlist_repo.find_by_id("wl_1")

    assert found == wishlist
    assert [i.id for i in found.items] == ["i1", "i2"]
    assert found.items[0].price == Decimal("150.00")
    assert found.items[0].priority is Priority.HIGH
    assert found.created_at.tzinfo is not None
    assert found.created_at.astimezone(timezone.utc) == JAN_1


@pytest.mark.asyncio
async def test_save_is_upsert(repositories):
    wishlist_repo, _ = repositories
    wishlist = make_wishlist("wl_1", items=(make_item("i1", "wl_1"), make_item("i2", "wl_1")))
    await wishlist_repo.save(wishlist)

    changed = wishlist.remove_item("i1").add_item(make_item("i3", "wl_1")).update("Renamed", "d")
    await wishlist_repo.save(changed)

    found = await wishlist_repo.find_by_id("wl_1")
    assert found.name == "Renamed"
    assert [i.id for i in found.items] == ["i2", "i3"]
    assert len(await wishlist_repo.find_all()) == 1


@pytest.mark.asyncio
async def test_find_missing(repositories):
    wishlist_repo, user_repo = repositories

    assert await wishlist_repo.find_by_id("missing") is None
    assert await wishlist_repo.find_by_user_id("nobody") == []
    assert await wishlist_repo.find_by_user_id_and_name("nobody", "x") is None
    assert await user_repo.find_by_id("nobody") is None


@pytest.mark.asyncio
async def test_find_by_user_id_and_name_ignores_case(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", name="Tech Wishlist"))
    await wishlist_repo.save(make_wishlist("wl_2", user_id="user_2", name="Tech Wishlist"))

    found = await wishlist_repo.find_by_user_id_and_name("user_1", "TECH wishlist")

    assert found.id == "wl_1"
    assert await wishlist_repo.find_by_user_id_and_name("user_1", "Tech") is None


@pytest.mark.asyncio
async def test_find_by_user_id(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1"))
    await wishlist_repo.save(make_wishlist("wl_2"))
    await wishlist_repo.save(make_wishlist("wl_3", user_id="user_2"))

    assert sorted(w.id for w in await wishlist_repo.find_by_user_id("user_1")) == ["wl_1", "wl_2"]


@pytest.mark.asyncio
async def test_delete_is_idempotent(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", items=(make_item("i1", "wl_1"),)))

    await wishlist_repo.delete("wl_1")
    await wishlist_repo.delete("wl_1")
    await wishlist_repo.delete("never-existed")

    assert await wishlist_repo.find_by_id("wl_1") is None
    assert await wishlist_repo.find_all() == []


@pytest.mark.asyncio
async def test_clear_default_for_user(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", is_default=True))
    await wishlist_repo.save(make_wishlist("wl_2", user_id="user_2", is_default=True))

    await wishlist_repo.clear_default_for_user("user_1")

    assert (await wishlist_repo.find_by_id("wl_1")).is_default is False
    assert (await wishlist_repo.find_by_id("wl_2")).is_default is True


@pytest.mark.asyncio
async def test_clear_default_refreshes_updated_at(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", is_default=True))
    await wishlist_repo.save(make_wishlist("wl_2"))

    await wishlist_repo.clear_default_for_user("user_1")

    cleared = await wishlist_repo.find_by_id("wl_1")
    assert cleared.updated_at > JAN_1
    assert cleared.updated_at.tzinfo is not None
    # Wishlists that were not default are left alone
    assert (await wishlist_repo.find_by_id("wl_2")).updated_at == JAN_1

    async with wishlist_repo.unit_of_work() as changes:
        changes.save(make_wishlist("wl_3", is_default=True))
    async with wishlist_repo.unit_of_work() as changes:
        changes.clear_default_for_user("user_1")

    assert (await wishlist_repo.find_by_id("wl_3")).updated_at > JAN_1


@pytest.mark.asyncio
async def test_find_by_user_id_and_name_folds_non_ascii(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", name="Über"))
    await wishlist_repo.save(make_wishlist("wl_2", name="Straße"))

    assert (await wishlist_repo.find_by_user_id_and_name("user_1", "über")).id == "wl_1"
    assert (await wishlist_repo.find_by_user_id_and_name("user_1", "STRASSE")).id == "wl_2"
    assert await wishlist_repo.find_by_user_id_and_name("user_2", "über") is None


@pytest.mark.asyncio
async def test_unit_of_work_applies_in_order(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", is_default=True))
    await wishlist_repo.save(make_wishlist("wl_old"))

    async with wishlist_repo.unit_of_work() as changes:
        changes.clear_default_for_user("user_1")
        changes.save(make_wishlist("wl_2", is_default=True))
        changes.delete("wl_old")

    assert (await wishlist_repo.find_by_id("wl_1")).is_default is False
    assert (await wishlist_repo.find_by_id("wl_2")).is_default is True
    assert await wishlist_repo.find_by_id("wl_old") is None


@pytest.mark.asyncio
async def test_unit_of_work_discards_on_error(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", is_default=True))

    with pytest.raises(RuntimeError):
        async with wishlist_repo.unit_of_work() as changes:
            changes.clear_default_for_user("user_1")
            changes.save(make_wishlist("wl_2", is_default=True))
            raise RuntimeError("boom")

    assert (await wishlist_repo.find_by_id("wl_1")).is_default is True
    assert await wishlist_repo.find_by_id("wl_2") is None


@pytest.mark.asyncio
async def test_failed_commit_leaves_store_untouched(repositories):
    wishlist_repo, _ = repositories
    await wishlist_repo.save(make_wishlist("wl_1", is_default=True))

    changes = WishlistChanges()
    changes.clear_default_for_user("user_1")
    changes.save(make_wishlist("wl_2"))
    changes.operations.append(("explode", None))

    with pytest.raises(ValueError):
        await wishlist_repo.commit(changes)

    assert (await wishlist_repo.find_by_id("wl_1")).is_default is True
    assert await wishlist_repo.find_by_id("wl_2") is None


@pytest.mark.asyncio
async def test_concurrent_saves_in_memory(wishlist_repo):
    """The in-memory store is shared safely between coroutines and threads"""
    await asyncio.gather(*(
        asyncio.to_thread(asyncio.run, wishlist_repo.save(make_wishlist(f"t_{n}", name=f"Thread {n}")))
        for n in range(10)
    ))

    await asyncio.gather(*(
        wishlist_repo.save(make_wishlist(f"wl_{n}", name=f"List {n}")) for n in range(20)
    ))

    assert len(await wishlist_repo.find_all()) == 30


@pytest.mark.asyncio
async def test_users(repositories):
    _, user_repo = repositories
    await user_repo.save(User("user_1", "john@example.com", "John Doe", JAN_1))
    await user_repo.save(User("user_2", "jane@example.com", "Jane Smith", JAN_1))
    await user_repo.save(User("user_1", "john@example.org", "John Doe", JAN_1))

    assert len(await user_repo.find_all()) == 2
    assert (await user_repo.find_by_id("user_1")).email == "john@example.org"


@pytest.mark.asyncio
async def test_clear(repositories):
    wishlist_repo, user_repo = repositories
    await user_repo.save(User("user_1", "john@example.com", "John Doe", JAN_1))
    await wishlist_repo.save(make_wishlist("wl_1", items=(make_item("i1", "wl_1"),)))

    await wishlist_repo.clear()
    await user_repo.clear()

    assert await wishlist_repo.find_all() == []
    assert await user_repo.find_all() == []

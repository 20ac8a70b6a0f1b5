import pytest
from decimal import Decimal

from app.domain.entities import Priority
from app.domain.exceptions import (
    ValidationError,
    WishlistItemNotFoundError,
    WishlistNotFoundError,
)
from app.services.wishlists import MoveItemsUseCase
from conftest import make_item, make_wishlist


@pytest.fixture
async def two_lists(wishlist_repo):
    """wl_1 holds [i1, i2]; wl_2 is empty"""
    i1 = make_item(
        "i1", "wl_1",
        price=Decimal("150.00"), priority=Priority.HIGH,
        currency="USD", thumbnail="aW1n", notes="gift",
    )
    i2 = make_item("i2", "wl_1")
    source = await wishlist_repo.save(make_wishlist("wl_1", items=(i1, i2)))
    destination = await wishlist_repo.save(make_wishlist("wl_2"))
    return source, destination


@pytest.mark.asyncio
async def test_move_single_item(wishlist_repo, two_lists):
    source, _ = two_lists
    original = source.find_item("i1")

    result = await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", ["i1"])

    assert [i.id for i in result.source.items] == ["i2"]
    assert [i.id for i in result.destination.items] == ["i1"]
    moved = result.destination.items[0]
    assert moved.wishlist_id == "wl_2"
    assert moved == original.move_to("wl_2")
    assert moved.added_at == original.added_at

    stored_source = await wishlist_repo.find_by_id("wl_1")
    stored_destination = await wishlist_repo.find_by_id("wl_2")
    assert stored_source == result.source
    assert stored_destination == result.destination


@pytest.mark.asyncio
async def test_move_keeps_request_order_and_collapses_repeats(wishlist_repo, two_lists):
    result = await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", ["i2", "i1", "i2"])

    assert result.source.items == ()
    assert [i.id for i in result.destination.items] == ["i2", "i1"]


@pytest.mark.asyncio
async def test_move_appends_after_existing_items(wishlist_repo, two_lists):
    await wishlist_repo.save(make_wishlist("wl_2", items=(make_item("x", "wl_2"),)))

    result = await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", ["i1"])

    assert [i.id for i in result.destination.items] == ["x", "i1"]


@pytest.mark.asyncio
async def test_move_with_missing_items_changes_nothing(wishlist_repo, two_lists):
    """One missing id aborts the whole batch and every missing id is reported"""
    source, destination = two_lists

    with pytest.raises(WishlistItemNotFoundError) as exc_info:
        await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", ["i1", "ghost", "phantom"])

    assert exc_info.value.item_ids == ["ghost", "phantom"]
    assert "ghost, phantom" in str(exc_info.value)
    assert await wishlist_repo.find_by_id("wl_1") == source
    assert await wishlist_repo.find_by_id("wl_2") == destination


@pytest.mark.asyncio
async def test_move_from_missing_source(wishlist_repo, two_lists):
    with pytest.raises(WishlistNotFoundError) as exc_info:
        await MoveItemsUseCase(wishlist_repo).execute("nope", "wl_2", ["i1"])

    assert exc_info.value.wishlist_id == "nope"


@pytest.mark.asyncio
async def test_move_to_missing_destination(wishlist_repo, two_lists):
    source, _ = two_lists

    with pytest.raises(WishlistNotFoundError) as exc_info:
        await MoveItemsUseCase(wishlist_repo).execute("wl_1", "nope", ["i1"])

    assert exc_info.value.wishlist_id == "nope"
    assert await wishlist_repo.find_by_id("wl_1") == source


@pytest.mark.asyncio
async def test_move_into_same_list_rejected(wishlist_repo, two_lists):
    with pytest.raises(ValidationError):
        await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_1", ["i1"])


@pytest.mark.asyncio
async def test_move_nothing_writes_nothing(wishlist_repo, two_lists):
    source, destination = two_lists

    result = await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", [])

    assert result.source == source
    assert result.destination == destination
    assert (await wishlist_repo.find_by_id("wl_1")).updated_at == source.updated_at


@pytest.mark.asyncio
async def test_move_saves_both_lists_in_one_commit(wishlist_repo, two_lists, monkeypatch):
    commits = []
    original_commit = wishlist_repo.commit

    async def recording_commit(changes):
        commits.append([op for op, _ in changes.operations])
        await original_commit(changes)

    monkeypatch.setattr(wishlist_repo, "commit", recording_commit)

    await MoveItemsUseCase(wishlist_repo).execute("wl_1", "wl_2", ["i1"])

    assert commits == [["save", "save"]]


@pytest.mark.asyncio
async def test_move_items_sql(database):
    """Items keep their ids when they change lists in the SQL store"""
    from app.repositories import SqlWishlistRepository

    repo = SqlWishlistRepository(database)
    await repo.save(make_wishlist("wl_1", items=(make_item("i1", "wl_1"), make_item("i2", "wl_1"))))
    await repo.save(make_wishlist("wl_2"))

    await MoveItemsUseCase(repo).execute("wl_1", "wl_2", ["i1"])

    source = await repo.find_by_id("wl_1")
    destination = await repo.find_by_id("wl_2")
    assert [i.id for i in source.items] == ["i2"]
    assert [i.id for i in destination.items] == ["i1"]
    assert destination.items[0].wishlist_id == "wl_2"
    assert destination.items[0].added_at == make_item("i1", "wl_1").added_at

"""Connection Repository — pair writes, pair deletes and the counterpart network view.

Invariants:
    - create_pair writes exactly two rows sharing connected_at and value
    - a unique-constraint violation leaves the table unchanged
    - a lone directional row still counts once for each endpoint
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from pollen8.core.errors import ConnectionAlreadyExistsError
from pollen8.models.connection import Connection
from pollen8.repositories.connection_repository import ConnectionRepository


async def _row_count(db) -> int:
    return (await db.execute(
        select(func.count()).select_from(Connection),
    )).scalar_one()


async def test_create_pair_writes_both_directions(test_db, users):
    repo = ConnectionRepository(test_db)
    forward = await repo.create_pair(users.alice, users.bob, 3.14)

    assert forward.user_id == users.alice
    assert forward.connected_user_id == users.bob
    rows = (await test_db.execute(select(Connection))).scalars().all()
    assert len(rows) == 2
    assert {(r.user_id, r.connected_user_id) for r in rows} == {
        (users.alice, users.bob), (users.bob, users.alice),
    }
    assert len({r.connected_at for r in rows}) == 1
    assert all(r.value == 3.14 for r in rows)


async def test_create_pair_unique_violation_rolls_back(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)

    with pytest.raises(ConnectionAlreadyExistsError):
        await repo.create_pair(users.alice, users.bob, 3.14)

    assert await _row_count(test_db) == 2


async def test_find_between_matches_either_direction(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)

    assert await repo.find_between(users.alice, users.bob) is not None
    assert await repo.find_between(users.bob, users.alice) is not None
    assert await repo.find_between(users.alice, users.carol) is None


async def test_delete_pair_removes_both_rows(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)
    await repo.create_pair(users.alice, users.carol, 3.14)

    removed = await repo.delete_pair(users.bob, users.alice)

    assert removed == 2
    assert await _row_count(test_db) == 2
    assert await repo.count_for_user(users.bob) == 0
    assert await repo.count_for_user(users.alice) == 1


async def test_lone_directional_row_counts_once_per_endpoint(test_db, users):
    test_db.add(Connection(user_id=users.carol, connected_user_id=users.alice))
    await test_db.commit()
    repo = ConnectionRepository(test_db)

    assert await repo.count_for_user(users.alice) == 1
    assert await repo.count_for_user(users.carol) == 1
    items, total = await repo.list_for_user(users.alice, 0, 10)
    assert total == 1
    assert items[0].user_id == users.carol


async def test_each_endpoint_sees_one_row_per_pair(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)

    for user_id in (users.alice, users.bob):
        items, total = await repo.list_for_user(user_id, 0, 10)
        assert total == 1
        assert len(items) == 1
        assert items[0].user_id == user_id


async def test_count_as_of_excludes_later_connections(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)
    now = datetime.now(timezone.utc)

    assert await repo.count_for_user(users.alice, as_of=now - timedelta(days=1)) == 0
    assert await repo.count_for_user(users.alice, as_of=now + timedelta(days=1)) == 1


async def test_list_for_user_pages(test_db, users):
    repo = ConnectionRepository(test_db)
    await repo.create_pair(users.alice, users.bob, 3.14)
    await repo.create_pair(users.alice, users.carol, 3.14)

    first, total = await repo.list_for_user(users.alice, 0, 1)
    second, _ = await repo.list_for_user(users.alice, 1, 1)

    assert total == 2
    assert len(first) == len(second) == 1
    assert first[0].id != second[0].id

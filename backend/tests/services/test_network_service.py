"""Network Service — connection lifecycle against a real (SQLite) store.

Invariants:
    - Creating a connection yields two rows; each endpoint sees exactly one
    - Duplicates in either direction are conflicts and change nothing
    - Removing a missing connection is ConnectionNotFoundError
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from pollen8.core.errors import (
    ConnectionAlreadyExistsError, ConnectionNotFoundError,
    InputValidationError, ResourceNotFoundError,
)
from pollen8.models.connection import Connection
from pollen8.models.industry import Industry
from pollen8.models.user import user_industries


async def _row_count(db) -> int:
    return (await db.execute(
        select(func.count()).select_from(Connection),
    )).scalar_one()


async def test_create_connection_is_bidirectional(network_service, users, test_db):
    connection = await network_service.create_connection(users.alice, users.bob)

    assert connection.value == 3.14
    assert await _row_count(test_db) == 2
    assert await network_service.get_network_size(users.alice) == 1
    assert await network_service.get_network_size(users.bob) == 1


async def test_self_connection_rejected(network_service, users, test_db):
    with pytest.raises(InputValidationError):
        await network_service.create_connection(users.alice, users.alice)
    assert await _row_count(test_db) == 0


async def test_unknown_user_rejected(network_service, users, test_db):
    with pytest.raises(ResourceNotFoundError):
        await network_service.create_connection(users.alice, uuid4())
    assert await _row_count(test_db) == 0


async def test_duplicate_connection_conflicts_in_both_directions(
    network_service, users, test_db,
):
    await network_service.create_connection(users.alice, users.bob)

    with pytest.raises(ConnectionAlreadyExistsError):
        await network_service.create_connection(users.alice, users.bob)
    with pytest.raises(ConnectionAlreadyExistsError):
        await network_service.create_connection(users.bob, users.alice)

    assert await _row_count(test_db) == 2


async def test_remove_connection_deletes_both_rows(network_service, users, test_db):
    await network_service.create_connection(users.alice, users.bob)

    await network_service.remove_connection(users.bob, users.alice)

    assert await _row_count(test_db) == 0
    assert await network_service.calculate_network_value(users.alice) == 0.0


async def test_remove_missing_connection_not_found(network_service, users):
    with pytest.raises(ConnectionNotFoundError) as exc:
        await network_service.remove_connection(users.alice, users.bob)
    assert exc.value.message == "Connection does not exist"


async def test_network_value_tracks_size(network_service, users):
    await network_service.create_connection(users.alice, users.bob)
    await network_service.create_connection(users.carol, users.alice)

    assert await network_service.calculate_network_value(users.alice) == 6.28
    assert await network_service.calculate_network_value(users.bob) == 3.14


async def test_get_network_for_user_paginates(network_service, users):
    await network_service.create_connection(users.alice, users.bob)
    await network_service.create_connection(users.alice, users.carol)

    page = await network_service.get_network_for_user(users.alice, page=2, limit=1)

    assert page.total == 2
    assert page.total_pages == 2
    assert len(page.items) == 1


async def test_get_network_for_user_rejects_bad_page(network_service, users):
    with pytest.raises(InputValidationError):
        await network_service.get_network_for_user(users.alice, page=0)


async def test_analytics_small_network_has_zero_growth(network_service, users):
    await network_service.create_connection(users.alice, users.bob)

    analytics = await network_service.get_network_analytics(users.alice)

    assert analytics.network_size == 1
    assert analytics.network_value == 3.14
    assert analytics.growth_rate == 0.0
    assert analytics.industry_distribution == {}
    assert [c.connected_user_id for c in analytics.connections] == [users.bob]


async def test_analytics_growth_against_discounted_baseline(
    network_service, users, make_user,
):
    for i in range(10):
        other = await make_user(f"+1555100{i:04d}")
        await network_service.create_connection(users.alice, other)

    analytics = await network_service.get_network_analytics(users.alice)

    assert analytics.network_size == 10
    assert analytics.network_value == 31.4
    assert analytics.growth_rate == 11.11


async def test_analytics_industry_distribution(network_service, users, test_db):
    tech = Industry(name="Technology")
    finance = Industry(name="Finance")
    test_db.add_all([tech, finance])
    await test_db.commit()
    await test_db.execute(user_industries.insert().values([
        {"user_id": users.bob, "industry_id": tech.id},
        {"user_id": users.carol, "industry_id": tech.id},
        {"user_id": users.carol, "industry_id": finance.id},
        {"user_id": users.alice, "industry_id": finance.id},
    ]))
    await test_db.commit()
    await network_service.create_connection(users.alice, users.bob)
    await network_service.create_connection(users.carol, users.alice)

    analytics = await network_service.get_network_analytics(users.alice)

    assert analytics.industry_distribution == {"Finance": 1, "Technology": 2}

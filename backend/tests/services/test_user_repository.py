"""User Repository — existence checks and windowed activity counts."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from pollen8.core.domain_types import ActivityKind
from pollen8.models.activity_event import ActivityEvent
from pollen8.repositories.connection_repository import ConnectionRepository
from pollen8.repositories.invite_repository import InviteRepository
from pollen8.repositories.user_repository import (
    UserActivityRepository, UserRepository,
)


async def test_exists(test_db, users):
    repo = UserRepository(test_db)
    assert await repo.exists(users.alice) is True
    assert await repo.exists(uuid4()) is False


async def test_activity_in_period_counts_window_only(test_db, users):
    now = datetime.now(timezone.utc)
    test_db.add_all([
        ActivityEvent(user_id=users.alice, kind=ActivityKind.LOGIN.value, occurred_at=now - timedelta(days=1)),
        ActivityEvent(user_id=users.alice, kind=ActivityKind.LOGIN.value, occurred_at=now - timedelta(days=2)),
        ActivityEvent(user_id=users.alice, kind=ActivityKind.LOGIN.value, occurred_at=now - timedelta(days=60)),
        ActivityEvent(user_id=users.alice, kind=ActivityKind.PROFILE_UPDATE.value, occurred_at=now - timedelta(days=3)),
        ActivityEvent(user_id=users.bob, kind=ActivityKind.LOGIN.value, occurred_at=now - timedelta(days=1)),
    ])
    await test_db.commit()
    await ConnectionRepository(test_db).create_pair(users.alice, users.bob, 3.14)
    await InviteRepository(test_db).create(users.alice, "Meetup", "https://x/1")

    activity = await UserActivityRepository(test_db).activity_in_period(
        users.alice, now - timedelta(days=30), now + timedelta(minutes=1),
    )

    assert activity.login_count == 2
    assert activity.profile_updates == 1
    assert activity.connection_interactions == 1
    assert activity.invites_sent == 1


async def test_get_by_id(test_db, users):
    repo = UserRepository(test_db)
    user = await repo.get_by_id(users.bob)
    assert user.phone_number == "+15550000002"
    assert await repo.get_by_id(uuid4()) is None

"""Invite Repository — click counters and the per-day analytics rows."""

from datetime import date
from uuid import uuid4

from sqlalchemy import select

from pollen8.models.invite_analytics import InviteAnalytics
from pollen8.repositories.invite_repository import InviteRepository


async def test_clicks_on_same_day_share_one_row(test_db, users):
    repo = InviteRepository(test_db)
    invite = await repo.create(users.alice, "Meetup", "https://x/1")
    invite_id = invite.id

    for on in (date(2024, 3, 10), date(2024, 3, 10), date(2024, 3, 11)):
        assert await repo.record_click(invite_id, on) is True

    rows = (await test_db.execute(
        select(InviteAnalytics.day, InviteAnalytics.clicks)
        .where(InviteAnalytics.invite_id == invite_id)
        .order_by(InviteAnalytics.day),
    )).all()
    assert [tuple(r) for r in rows] == [
        (date(2024, 3, 10), 2), (date(2024, 3, 11), 1),
    ]
    assert (await repo.get_by_id(invite_id)).click_count == 3


async def test_daily_clicks_window_is_inclusive(test_db, users):
    repo = InviteRepository(test_db)
    invite = await repo.create(users.alice, "Meetup", "https://x/2")
    invite_id = invite.id
    for on in (date(2024, 3, 1), date(2024, 3, 5), date(2024, 3, 9)):
        await repo.record_click(invite_id, on)

    assert await repo.daily_clicks(invite_id, date(2024, 3, 1), date(2024, 3, 5)) == [
        (date(2024, 3, 1), 1), (date(2024, 3, 5), 1),
    ]


async def test_click_on_unknown_invite_writes_nothing(test_db):
    repo = InviteRepository(test_db)

    assert await repo.record_click(uuid4(), date(2024, 3, 1)) is False
    rows = (await test_db.execute(select(InviteAnalytics))).scalars().all()
    assert rows == []

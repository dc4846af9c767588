"""User Repository — user existence checks and activity counts for analytics.

Invariants:
    - exists() never raises for a missing user; it returns False
    - Activity windows are inclusive on both ends
"""

from datetime import datetime

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from pollen8.core.domain_types import ActivityKind, UserId
from pollen8.core.reports import UserActivity
from pollen8.models.activity_event import ActivityEvent
from pollen8.models.connection import Connection
from pollen8.models.invite import Invite
from pollen8.models.user import User


class UserRepository:
    """UserDirectory backed by the users table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.id == user_id),
        )
        return result.scalar_one_or_none() is not None

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)


class UserActivityRepository:
    """UserActivitySource: counts events, outgoing connections and invites."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def activity_in_period(
        self, user_id: UserId, start: datetime, end: datetime,
    ) -> UserActivity:
        return UserActivity(
            login_count=await self._count_events(
                user_id, ActivityKind.LOGIN, start, end,
            ),
            connection_interactions=await self._count(
                select(func.count()).select_from(Connection).where(
                    Connection.user_id == user_id,
                    Connection.connected_at.between(start, end),
                ),
            ),
            invites_sent=await self._count(
                select(func.count()).select_from(Invite).where(
                    Invite.user_id == user_id,
                    Invite.created_at.between(start, end),
                ),
            ),
            profile_updates=await self._count_events(
                user_id, ActivityKind.PROFILE_UPDATE, start, end,
            ),
        )

    async def _count_events(
        self, user_id: UserId, kind: ActivityKind, start: datetime, end: datetime,
    ) -> int:
        return await self._count(
            select(func.count()).select_from(ActivityEvent).where(
                ActivityEvent.user_id == user_id,
                ActivityEvent.kind == kind.value,
                ActivityEvent.occurred_at.between(start, end),
            ),
        )

    async def _count(self, query) -> int:
        return (await self.db.execute(query)).scalar_one()

"""Invite Repository — persistence for invites, their counters and daily click analytics.

Invariants:
    - create() surfaces a url collision as ConflictError (code INVITE_URL_TAKEN)
    - record_click() increments click_count and today's InviteAnalytics row in one commit
    - Counters only move up, via SQL-side increments
    - Unknown invite ids return False from the record_* methods; nothing is written

Design Decisions:
    - get_by_id uses populate_existing so counters reflect the latest commit even
      when the row is already in the session identity map
"""

import logging
from datetime import date

from sqlalchemy import select, func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pollen8.core.domain_types import InviteId, UserId
from pollen8.core.errors import ConflictError, ErrorContext
from pollen8.models.invite import Invite
from pollen8.models.invite_analytics import InviteAnalytics

logger = logging.getLogger(__name__)


class InviteRepository:
    """InviteStore backed by the invites and invite_analytics tables."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: UserId, name: str, url: str) -> Invite:
        invite = Invite(user_id=user_id, name=name, url=url)
        self.db.add(invite)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Invite insert rejected: {e.orig}", extra={"user_id": user_id},
            )
            raise ConflictError(
                "Invite URL already in use", "INVITE_URL_TAKEN",
                context=ErrorContext(user_id=str(user_id), operation="create_invite"),
            )
        return invite

    async def get_by_id(self, invite_id: InviteId) -> Invite | None:
        result = await self.db.execute(
            select(Invite)
            .where(Invite.id == invite_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def list_for_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> tuple[list[Invite], int]:
        result = await self.db.execute(
            select(Invite)
            .where(Invite.user_id == user_id)
            .order_by(Invite.created_at.desc(), Invite.id)
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True),
        )
        items = list(result.scalars().all())
        total = (await self.db.execute(
            select(func.count())
            .select_from(Invite)
            .where(Invite.user_id == user_id),
        )).scalar_one()
        return items, total

    async def record_click(self, invite_id: InviteId, on: date) -> bool:
        """Add one click to the invite and to its analytics row for `on`."""
        result = await self.db.execute(
            update(Invite)
            .where(Invite.id == invite_id)
            .values(click_count=Invite.click_count + 1),
        )
        if not result.rowcount:
            await self.db.rollback()
            return False

        bumped = await self.db.execute(
            update(InviteAnalytics)
            .where(
                InviteAnalytics.invite_id == invite_id,
                InviteAnalytics.day == on,
            )
            .values(clicks=InviteAnalytics.clicks + 1),
        )
        if not bumped.rowcount:
            self.db.add(InviteAnalytics(invite_id=invite_id, day=on, clicks=1))
        await self.db.commit()
        return True

    async def record_conversion(self, invite_id: InviteId) -> bool:
        result = await self.db.execute(
            update(Invite)
            .where(Invite.id == invite_id)
            .values(conversion_count=Invite.conversion_count + 1),
        )
        if not result.rowcount:
            await self.db.rollback()
            return False
        await self.db.commit()
        return True

    async def daily_clicks(
        self, invite_id: InviteId, start: date, end: date,
    ) -> list[tuple[date, int]]:
        """(day, clicks) for each recorded day in [start, end], oldest first."""
        result = await self.db.execute(
            select(InviteAnalytics.day, InviteAnalytics.clicks)
            .where(
                InviteAnalytics.invite_id == invite_id,
                InviteAnalytics.day >= start,
                InviteAnalytics.day <= end,
            )
            .order_by(InviteAnalytics.day.asc()),
        )
        return [(day, clicks) for day, clicks in result.all()]

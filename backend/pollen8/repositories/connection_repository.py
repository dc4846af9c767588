"""Connection Repository — persistence for directional connection rows and their pairs.

Invariants:
    - create_pair writes A->B and B->A in one commit; a unique-constraint
      violation rolls both back and raises ConnectionAlreadyExistsError
    - delete_pair removes both directions in one commit
    - A user's network is one row per counterpart: the user's own outgoing row,
      or the incoming row when its reverse is missing
    - Listing order: connected_at desc, then id (stable across pages)

Design Decisions:
    - Network filter built once (_network_filter) and shared by list and count
      so totals always match the listed rows
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import and_, delete, exists, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from pollen8.core.domain_types import UserId
from pollen8.core.errors import ConnectionAlreadyExistsError, ErrorContext
from pollen8.models.connection import Connection

logger = logging.getLogger(__name__)


def _pair_filter(user_id: UserId, connected_user_id: UserId):
    return or_(
        and_(
            Connection.user_id == user_id,
            Connection.connected_user_id == connected_user_id,
        ),
        and_(
            Connection.user_id == connected_user_id,
            Connection.connected_user_id == user_id,
        ),
    )


def _network_filter(user_id: UserId):
    reverse = aliased(Connection)
    has_reverse = exists().where(
        reverse.user_id == user_id,
        reverse.connected_user_id == Connection.user_id,
    )
    return or_(
        Connection.user_id == user_id,
        and_(Connection.connected_user_id == user_id, ~has_reverse),
    )


class ConnectionRepository:
    """ConnectionStore backed by the connections table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_between(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> Connection | None:
        """Any row linking the two users, in either direction."""
        result = await self.db.execute(
            select(Connection)
            .where(_pair_filter(user_id, connected_user_id))
            .limit(1),
        )
        return result.scalars().first()

    async def create_pair(
        self, user_id: UserId, connected_user_id: UserId, value: float,
    ) -> Connection:
        """Insert both directions; returns the forward row."""
        now = datetime.now(timezone.utc)
        forward = Connection(
            user_id=user_id, connected_user_id=connected_user_id,
            value=value, connected_at=now,
        )
        backward = Connection(
            user_id=connected_user_id, connected_user_id=user_id,
            value=value, connected_at=now,
        )
        self.db.add_all([forward, backward])
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Connection pair rejected by unique constraint: {e.orig}",
                extra={
                    "user_id": user_id, "connected_user_id": connected_user_id,
                },
            )
            raise ConnectionAlreadyExistsError(
                str(user_id), str(connected_user_id),
                context=ErrorContext(
                    user_id=str(user_id), operation="create_connection",
                ),
            )
        return forward

    async def delete_pair(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> int:
        """Delete both directions; returns the number of rows removed."""
        result = await self.db.execute(
            delete(Connection).where(_pair_filter(user_id, connected_user_id)),
        )
        await self.db.commit()
        return result.rowcount or 0

    async def list_for_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> tuple[list[Connection], int]:
        result = await self.db.execute(
            select(Connection)
            .where(_network_filter(user_id))
            .order_by(Connection.connected_at.desc(), Connection.id)
            .offset(offset)
            .limit(limit),
        )
        items = list(result.scalars().all())
        total = await self.count_for_user(user_id)
        return items, total

    async def count_for_user(
        self, user_id: UserId, as_of: datetime | None = None,
    ) -> int:
        """Network size, optionally as it stood at `as_of`."""
        query = (
            select(func.count())
            .select_from(Connection)
            .where(_network_filter(user_id))
        )
        if as_of is not None:
            query = query.where(Connection.connected_at <= as_of)
        result = await self.db.execute(query)
        return result.scalar_one()

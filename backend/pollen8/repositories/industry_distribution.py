"""Industry Distribution — IndustryCategorizer over the industries of a user's counterparts.

Invariants:
    - Counterparts are the users on the other end of any connection row touching the user
    - A counterpart with several industries counts once per industry
    - Users without connections (or whose counterparts list no industry) get {}
"""

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from pollen8.core.domain_types import UserId
from pollen8.models.connection import Connection
from pollen8.models.industry import Industry
from pollen8.models.user import user_industries


class SqlIndustryCategorizer:
    """Counts counterparts per industry name."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def categorize(self, user_id: UserId) -> dict[str, int]:
        outgoing = select(Connection.connected_user_id).where(
            Connection.user_id == user_id,
        )
        incoming = select(Connection.user_id).where(
            Connection.connected_user_id == user_id,
        )
        result = await self.db.execute(
            select(Industry.name, func.count(user_industries.c.user_id))
            .join(user_industries, user_industries.c.industry_id == Industry.id)
            .where(or_(
                user_industries.c.user_id.in_(outgoing),
                user_industries.c.user_id.in_(incoming),
            ))
            .group_by(Industry.name)
            .order_by(Industry.name),
        )
        return {name: count for name, count in result.all()}

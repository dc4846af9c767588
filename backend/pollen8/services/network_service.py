"""Network Service — connection lifecycle and network value/analytics.

Invariants:
    - create_connection: self-links rejected before IO; both users must exist;
      an existing row in either direction is a conflict; both directions are
      written by one create_pair call
    - remove_connection: missing pair is ConnectionNotFoundError; both directions
      removed by one delete_pair call
    - network size = number of counterparts (one row per relationship)
    - growth_rate in analytics is 0.0 when the prior-period baseline is 0

Design Decisions:
    - Baseline and industry breakdown are injected strategies, so the service
      holds no placeholder numbers
"""

import logging
from datetime import datetime

from pollen8.core.domain_types import UserId
from pollen8.core.errors import (
    ConnectionAlreadyExistsError, ConnectionNotFoundError, ErrorContext,
    InputValidationError, ResourceNotFoundError,
)
from pollen8.core.network_value import (
    CONNECTION_VALUE, calculate_growth_rate, calculate_network_value,
)
from pollen8.core.pagination import Page, page_offset, validate_page
from pollen8.core.reports import NetworkAnalytics
from pollen8.core.repository_protocols import (
    ConnectionLike, ConnectionStore, IndustryCategorizer,
    PriorPeriodBaseline, UserDirectory,
)

logger = logging.getLogger(__name__)

ANALYTICS_SCAN_LIMIT = 1000


class NetworkService:
    """Connection lifecycle and network value computation."""

    def __init__(
        self,
        connections: ConnectionStore,
        users: UserDirectory,
        baseline: PriorPeriodBaseline,
        categorizer: IndustryCategorizer,
        scan_limit: int = ANALYTICS_SCAN_LIMIT,
    ):
        self.connections = connections
        self.users = users
        self.baseline = baseline
        self.categorizer = categorizer
        self.scan_limit = scan_limit

    async def create_connection(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> ConnectionLike:
        """Connect two users in both directions; returns the forward record."""
        if user_id == connected_user_id:
            raise InputValidationError(
                "A user cannot connect to themselves", "connected_user_id",
            )
        await self._require_users(user_id, connected_user_id)

        existing = await self.connections.find_between(user_id, connected_user_id)
        if existing is not None:
            raise ConnectionAlreadyExistsError(
                str(user_id), str(connected_user_id),
                context=ErrorContext(
                    user_id=str(user_id), operation="create_connection",
                ),
            )

        connection = await self.connections.create_pair(
            user_id, connected_user_id, CONNECTION_VALUE,
        )
        logger.info(
            "Connection created",
            extra={"user_id": user_id, "connected_user_id": connected_user_id},
        )
        return connection

    async def remove_connection(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> None:
        existing = await self.connections.find_between(user_id, connected_user_id)
        if existing is None:
            raise ConnectionNotFoundError(
                str(user_id), str(connected_user_id),
                context=ErrorContext(
                    user_id=str(user_id), operation="remove_connection",
                ),
            )
        removed = await self.connections.delete_pair(user_id, connected_user_id)
        logger.info(
            f"Connection removed ({removed} row(s))",
            extra={"user_id": user_id, "connected_user_id": connected_user_id},
        )

    async def get_network_for_user(
        self, user_id: UserId, page: int = 1, limit: int = 10,
    ) -> Page[ConnectionLike]:
        validate_page(page, limit)
        items, total = await self.connections.list_for_user(
            user_id, page_offset(page, limit), limit,
        )
        return Page(items=items, total=total, page=page, limit=limit)

    async def get_network_size(self, user_id: UserId) -> int:
        return await self.connections.count_for_user(user_id)

    async def get_network_size_at(self, user_id: UserId, at: datetime) -> int:
        """Network size counting only connections made on or before `at`."""
        return await self.connections.count_for_user(user_id, as_of=at)

    async def calculate_network_value(self, user_id: UserId) -> float:
        return calculate_network_value(await self.get_network_size(user_id))

    async def get_network_analytics(self, user_id: UserId) -> NetworkAnalytics:
        """Size, value, growth against the prior period, industries, connections."""
        network = await self.get_network_for_user(
            user_id, page=1, limit=self.scan_limit,
        )
        size = network.total
        previous = await self.baseline.previous_size(user_id, size)
        growth_rate = (
            calculate_growth_rate(previous, size) if previous else 0.0
        )
        return NetworkAnalytics(
            network_size=size,
            network_value=calculate_network_value(size),
            growth_rate=growth_rate,
            industry_distribution=await self.categorizer.categorize(user_id),
            connections=network.items,
        )

    async def _require_users(self, *user_ids: UserId) -> None:
        # sequential: one AsyncSession runs one statement at a time
        for user_id in user_ids:
            if not await self.users.exists(user_id):
                raise ResourceNotFoundError(
                    "User", str(user_id),
                    context=ErrorContext(user_id=str(user_id)),
                )

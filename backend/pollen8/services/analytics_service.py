"""Analytics Service — growth, engagement and invite-effectiveness metrics over time windows.

Invariants:
    - Every argument check (missing input, start > end, malformed period) runs
      before any store call
    - Zero denominators yield 0.0 (growth rate, average per day, CTR, conversion)
    - Weights are fixed: engagement 0.3/0.4/0.2/0.1, effectiveness 0.4/0.6
    - Invite scans read at most scan_limit invites

Design Decisions:
    - Thin aggregator over NetworkService, InviteService and a UserActivitySource;
      all arithmetic lives in core/metrics.py and core/network_value.py
    - Clock injected (`now`) so period windows are testable
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from pollen8.core.domain_types import UserId
from pollen8.core.errors import InputValidationError
from pollen8.core.metrics import (
    days_between, engagement_score, fractional_days, invite_effectiveness,
    parse_period_days, safe_ratio, validate_date_range,
)
from pollen8.core.network_value import calculate_network_value
from pollen8.core.reports import (
    InviteEffectiveness, NetworkGrowth, UserEngagement,
)
from pollen8.core.repository_protocols import UserActivitySource
from pollen8.services.invite_service import InviteService
from pollen8.services.network_service import NetworkService

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnalyticsService:
    """Cross-cutting analytics built on the network and invite services."""

    def __init__(
        self,
        network: NetworkService,
        invites: InviteService,
        activity: UserActivitySource,
        scan_limit: int = 1000,
        now: Callable[[], datetime] = _utc_now,
    ):
        self.network = network
        self.invites = invites
        self.activity = activity
        self.scan_limit = scan_limit
        self.now = now

    async def calculate_network_growth(
        self,
        user_id: UserId | None,
        start_date: datetime | None,
        end_date: datetime | None,
    ) -> NetworkGrowth:
        if not user_id:
            raise InputValidationError("user_id is required", "user_id")
        start_date, end_date = validate_date_range(start_date, end_date)

        start_size = await self.network.get_network_size_at(user_id, start_date)
        end_size = await self.network.get_network_size_at(user_id, end_date)
        new_connections = end_size - start_size

        start_value = calculate_network_value(start_size)
        end_value = calculate_network_value(end_size)
        return NetworkGrowth(
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
            start_network_size=start_size,
            end_network_size=end_size,
            new_connections=new_connections,
            growth_rate=safe_ratio(new_connections, start_size) * 100,
            average_growth_per_day=safe_ratio(
                new_connections, fractional_days(start_date, end_date),
            ),
            start_network_value=start_value,
            end_network_value=end_value,
            network_value_growth=round(end_value - start_value, 2),
        )

    async def get_user_engagement(
        self, user_id: UserId | None, period: str | None,
    ) -> UserEngagement:
        if not user_id:
            raise InputValidationError("user_id is required", "user_id")
        days = parse_period_days(period)

        end_date = self.now()
        start_date = end_date - timedelta(days=days)
        activity = await self.activity.activity_in_period(
            user_id, start_date, end_date,
        )

        login_frequency = safe_ratio(
            activity.login_count, days_between(start_date, end_date),
        )
        return UserEngagement(
            user_id=user_id,
            period=period,
            start_date=start_date,
            end_date=end_date,
            login_frequency=login_frequency,
            connection_interactions=activity.connection_interactions,
            invites_sent=activity.invites_sent,
            profile_updates=activity.profile_updates,
            engagement_score=engagement_score(
                login_frequency,
                activity.connection_interactions,
                activity.invites_sent,
                activity.profile_updates,
            ),
        )

    async def get_invite_effectiveness(self, user_id: UserId) -> InviteEffectiveness:
        invites = await self.invites.get_invites_by_user(
            user_id, page=1, limit=self.scan_limit,
        )
        if invites.total > len(invites.items):
            logger.warning(
                f"Invite effectiveness truncated to {len(invites.items)} "
                f"of {invites.total} invites",
                extra={"user_id": user_id},
            )

        total_invites = len(invites.items)
        total_clicks = sum(i.click_count for i in invites.items)
        total_conversions = sum(i.conversion_count or 0 for i in invites.items)
        return InviteEffectiveness(
            user_id=user_id,
            total_invites=total_invites,
            total_clicks=total_clicks,
            total_conversions=total_conversions,
            **invite_effectiveness(total_invites, total_clicks, total_conversions),
        )

    async def get_network_value(self, user_id: UserId) -> float:
        return await self.network.calculate_network_value(user_id)

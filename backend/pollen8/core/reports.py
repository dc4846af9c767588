"""Analytics Reports — value objects returned by the network, invite and analytics services.

Invariants:
    - Reports are plain data: built once by a service, never mutated afterwards
    - Every float field is finite (zero denominators already mapped to 0.0)
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class UserActivity:
    """Raw activity counts for one user over a window."""
    login_count: int = 0
    connection_interactions: int = 0
    invites_sent: int = 0
    profile_updates: int = 0


@dataclass(frozen=True)
class NetworkAnalytics:
    network_size: int
    network_value: float
    growth_rate: float
    industry_distribution: dict[str, int]
    connections: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class NetworkGrowth:
    user_id: UUID
    start_date: datetime
    end_date: datetime
    start_network_size: int
    end_network_size: int
    new_connections: int
    growth_rate: float
    average_growth_per_day: float
    start_network_value: float
    end_network_value: float
    network_value_growth: float


@dataclass(frozen=True)
class UserEngagement:
    user_id: UUID
    period: str
    start_date: datetime
    end_date: datetime
    login_frequency: float
    connection_interactions: int
    invites_sent: int
    profile_updates: int
    engagement_score: float


@dataclass(frozen=True)
class InviteEffectiveness:
    user_id: UUID
    total_invites: int
    total_clicks: int
    total_conversions: int
    click_through_rate: float
    conversion_rate: float
    overall_effectiveness: float


@dataclass(frozen=True)
class DailyClicks:
    date: date
    clicks: int


@dataclass(frozen=True)
class InviteAnalyticsReport:
    invite_id: UUID
    total_clicks: int
    clicks_per_day: float
    conversion_rate: float
    daily_clicks: list[DailyClicks] = field(default_factory=list)

"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no base class
    - Pair operations (create_pair/delete_pair) are single store calls so the
      two directional rows commit or roll back together
    - Placeholder analytics (prior-period baseline, industry buckets, assumed
      conversion) are strategies, not inline constants
"""

from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from pollen8.core.domain_types import UserId, InviteId
from pollen8.core.reports import UserActivity


class ConnectionLike(Protocol):
    """Structural contract for Connection records handed across the boundary."""
    id: UUID
    user_id: UUID
    connected_user_id: UUID
    value: float
    connected_at: datetime


class InviteLike(Protocol):
    """Structural contract for Invite records handed across the boundary."""
    id: UUID
    user_id: UUID
    name: str
    url: str
    click_count: int
    conversion_count: int
    created_at: datetime


class UserDirectory(Protocol):
    """User existence/lookup — user management itself lives elsewhere."""
    async def exists(self, user_id: UserId) -> bool: ...
    async def get_by_id(self, user_id: UserId) -> object | None: ...


class ConnectionStore(Protocol):
    """Contract for connection persistence — implemented by shell."""
    async def find_between(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> ConnectionLike | None: ...
    async def create_pair(
        self, user_id: UserId, connected_user_id: UserId, value: float,
    ) -> ConnectionLike: ...
    async def delete_pair(
        self, user_id: UserId, connected_user_id: UserId,
    ) -> int: ...
    async def list_for_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> tuple[list[ConnectionLike], int]: ...
    async def count_for_user(
        self, user_id: UserId, as_of: datetime | None = None,
    ) -> int: ...


class InviteStore(Protocol):
    """Contract for invite persistence — implemented by shell."""
    async def create(self, user_id: UserId, name: str, url: str) -> InviteLike: ...
    async def get_by_id(self, invite_id: InviteId) -> InviteLike | None: ...
    async def list_for_user(
        self, user_id: UserId, offset: int, limit: int,
    ) -> tuple[list[InviteLike], int]: ...
    async def record_click(self, invite_id: InviteId, on: date) -> bool: ...
    async def record_conversion(self, invite_id: InviteId) -> bool: ...
    async def daily_clicks(
        self, invite_id: InviteId, start: date, end: date,
    ) -> list[tuple[date, int]]: ...


class UserActivitySource(Protocol):
    """Activity counts for engagement analytics."""
    async def activity_in_period(
        self, user_id: UserId, start: datetime, end: datetime,
    ) -> UserActivity: ...


class IndustryCategorizer(Protocol):
    """Breaks a user's network down by industry."""
    async def categorize(self, user_id: UserId) -> dict[str, int]: ...


class PriorPeriodBaseline(Protocol):
    """Network size one period ago, used as the growth-rate baseline."""
    async def previous_size(self, user_id: UserId, current_size: int) -> int: ...


class ConversionEstimator(Protocol):
    """Conversion figure for an invite absent real sign-up tracking."""
    def conversion_rate(self, total_clicks: int) -> float: ...

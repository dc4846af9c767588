"""Invite Service — invite creation, click/conversion tracking and per-invite analytics.

Invariants:
    - New invites start with click_count = 0 and a URL no other invite has used
    - track_invite_click never fails silently: any failure (unknown invite,
      store error) is logged and raised as InviteTrackingError
    - get_invite_analytics validates arguments before any IO
    - clicks_per_day = total_clicks / ceil(days in window), 0.0 for a zero-length window

Design Decisions:
    - URL collisions are retried with a fresh token up to max_url_attempts;
      the invites.url unique index is what detects them
    - Conversion figure comes from an injected ConversionEstimator
"""

import logging
import secrets
from collections.abc import Callable
from datetime import date, datetime, timezone

from pollen8.core.domain_types import InviteId, UserId
from pollen8.core.errors import (
    ConflictError, DuplicateInviteUrlError, ErrorContext, InputValidationError,
    InviteTrackingError, ResourceNotFoundError,
)
from pollen8.core.invite_links import TokenSource, generate_invite_url
from pollen8.core.metrics import days_between, safe_ratio, validate_date_range
from pollen8.core.pagination import Page, page_offset, validate_page
from pollen8.core.reports import DailyClicks, InviteAnalyticsReport
from pollen8.core.repository_protocols import (
    ConversionEstimator, InviteLike, InviteStore, UserDirectory,
)

logger = logging.getLogger(__name__)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class InviteService:
    """Invite lifecycle and invite-level analytics."""

    def __init__(
        self,
        invites: InviteStore,
        users: UserDirectory,
        conversion: ConversionEstimator,
        base_url: str,
        token_bytes: int = 9,
        max_url_attempts: int = 5,
        token_source: TokenSource = secrets.token_urlsafe,
        today: Callable[[], date] = _utc_today,
    ):
        self.invites = invites
        self.users = users
        self.conversion = conversion
        self.base_url = base_url
        self.token_bytes = token_bytes
        self.max_url_attempts = max_url_attempts
        self.token_source = token_source
        self.today = today

    async def create_invite(self, user_id: UserId, name: str) -> InviteLike:
        name = (name or "").strip()
        if not name:
            raise InputValidationError("Invite name is required", "name")
        if not await self.users.exists(user_id):
            raise ResourceNotFoundError(
                "User", str(user_id), context=ErrorContext(user_id=str(user_id)),
            )

        for attempt in range(1, self.max_url_attempts + 1):
            url = generate_invite_url(
                self.base_url, self.token_bytes, self.token_source,
            )
            try:
                invite = await self.invites.create(user_id, name, url)
            except ConflictError:
                logger.warning(
                    "Invite URL collision, regenerating",
                    extra={"user_id": user_id, "attempt": attempt},
                )
                continue
            logger.info(
                "Invite created",
                extra={"user_id": user_id, "invite_id": invite.id},
            )
            return invite

        raise DuplicateInviteUrlError(
            self.max_url_attempts,
            context=ErrorContext(user_id=str(user_id), operation="create_invite"),
        )

    async def get_invites_by_user(
        self, user_id: UserId, page: int = 1, limit: int = 10,
    ) -> Page[InviteLike]:
        validate_page(page, limit)
        items, total = await self.invites.list_for_user(
            user_id, page_offset(page, limit), limit,
        )
        return Page(items=items, total=total, page=page, limit=limit)

    async def track_invite_click(self, invite_id: InviteId) -> None:
        """Record one click; raises InviteTrackingError on any failure."""
        try:
            recorded = await self.invites.record_click(invite_id, self.today())
        except Exception as e:
            logger.error(
                f"Error tracking invite click: {e}",
                extra={"invite_id": invite_id}, exc_info=True,
            )
            raise InviteTrackingError(str(invite_id)) from e

        if not recorded:
            logger.error(
                "Error tracking invite click: invite not found",
                extra={"invite_id": invite_id},
            )
            raise InviteTrackingError(str(invite_id), invite_missing=True)

    async def record_invite_conversion(self, invite_id: InviteId) -> None:
        if not await self.invites.record_conversion(invite_id):
            raise ResourceNotFoundError(
                "Invite", str(invite_id),
                context=ErrorContext(invite_id=str(invite_id)),
            )

    async def get_invite_analytics(
        self,
        invite_id: InviteId | None,
        start_date: datetime | None,
        end_date: datetime | None,
    ) -> InviteAnalyticsReport:
        if not invite_id:
            raise InputValidationError("invite_id is required", "invite_id")
        start_date, end_date = validate_date_range(start_date, end_date)

        invite = await self.invites.get_by_id(invite_id)
        if invite is None:
            raise ResourceNotFoundError(
                "Invite", str(invite_id),
                context=ErrorContext(invite_id=str(invite_id)),
            )

        daily = await self.invites.daily_clicks(
            invite_id, start_date.date(), end_date.date(),
        )
        return InviteAnalyticsReport(
            invite_id=invite.id,
            total_clicks=invite.click_count,
            clicks_per_day=safe_ratio(
                invite.click_count, days_between(start_date, end_date),
            ),
            conversion_rate=self.conversion.conversion_rate(invite.click_count),
            daily_clicks=[DailyClicks(date=d, clicks=c) for d, c in daily],
        )

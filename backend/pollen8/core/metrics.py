"""Metric Math — ratios, day spans, period parsing and weighted scores for analytics.

Invariants:
    - safe_ratio never returns NaN or infinity: a zero denominator yields 0.0
    - Date ranges are validated (both present, start <= end) before any IO
    - A date without a timezone is read as UTC, so mixed inputs compare
    - Weights are module constants; every score is a plain weighted sum

Design Decisions:
    - Pure functions shared by InviteService and AnalyticsService so both apply
      the same zero-denominator policy
    - days_between() rounds up (a partial day counts as a day);
      fractional_days() is exact and used for average growth per day
"""

import math
import re
from datetime import datetime, timezone

from pollen8.core.errors import InputValidationError

SECONDS_PER_DAY = 86_400

ENGAGEMENT_WEIGHTS = {
    "login_frequency": 0.3,
    "connection_interactions": 0.4,
    "invites_sent": 0.2,
    "profile_updates": 0.1,
}

CLICK_THROUGH_WEIGHT = 0.4
CONVERSION_WEIGHT = 0.6

_PERIOD_PATTERN = re.compile(r"^\s*(\d+)d\s*$", re.IGNORECASE)


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is zero."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_date_range(
    start_date: datetime | None, end_date: datetime | None,
) -> tuple[datetime, datetime]:
    """Return the range with naive dates read as UTC.

    Raises InputValidationError for a missing or inverted range.
    """
    if start_date is None:
        raise InputValidationError("start_date is required", "start_date")
    if end_date is None:
        raise InputValidationError("end_date is required", "end_date")
    start_date, end_date = _as_utc(start_date), _as_utc(end_date)
    if start_date > end_date:
        raise InputValidationError(
            "Start date must be before end date", "start_date",
        )
    return start_date, end_date


def fractional_days(start_date: datetime, end_date: datetime) -> float:
    return (end_date - start_date).total_seconds() / SECONDS_PER_DAY


def days_between(start_date: datetime, end_date: datetime) -> int:
    """Whole days spanned by the range, rounded up."""
    return math.ceil(fractional_days(start_date, end_date))


def parse_period_days(period: str | None) -> int:
    """Parse a period such as "30d" into a day count (>= 1)."""
    if not period:
        raise InputValidationError("period is required", "period")
    match = _PERIOD_PATTERN.match(period)
    if not match:
        raise InputValidationError(
            'Invalid period format. Use format like "7d", "30d", etc.',
            "period",
        )
    days = int(match.group(1))
    if days < 1:
        raise InputValidationError("period must cover at least one day", "period")
    return days


def engagement_score(
    login_frequency: float,
    connection_interactions: int,
    invites_sent: int,
    profile_updates: int,
) -> float:
    w = ENGAGEMENT_WEIGHTS
    return (
        login_frequency * w["login_frequency"]
        + connection_interactions * w["connection_interactions"]
        + invites_sent * w["invites_sent"]
        + profile_updates * w["profile_updates"]
    )


def invite_effectiveness(
    total_invites: int, total_clicks: int, total_conversions: int,
) -> dict:
    """Click-through, conversion and blended effectiveness for a set of invites.

    Returns a flat dict of floats so callers can splat it into a report.
    """
    click_through_rate = safe_ratio(total_clicks, total_invites)
    conversion_rate = safe_ratio(total_conversions, total_clicks)
    return {
        "click_through_rate": click_through_rate,
        "conversion_rate": conversion_rate,
        "overall_effectiveness": (
            click_through_rate * CLICK_THROUGH_WEIGHT
            + conversion_rate * CONVERSION_WEIGHT
        ),
    }

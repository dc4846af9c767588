"""Analytics Strategies — default implementations of the placeholder analytics inputs.

Invariants:
    - DiscountedPriorPeriod: previous size = floor(current × factor), factor 0.9 by default
    - FixedConversionEstimator: total_clicks × rate × 100, rate 0.1 by default
    - FixedIndustryDistribution: constant buckets, independent of the user

Design Decisions:
    - Each placeholder is a small class behind a Protocol (core/repository_protocols.py)
      so a real historical source or categorizer can replace it at wiring time
    - Parameters come from Settings, not from literals in services
"""

import math

from pollen8.core.domain_types import UserId

DEFAULT_INDUSTRY_BUCKETS = {
    "Technology": 40,
    "Finance": 30,
    "Healthcare": 20,
    "Other": 10,
}


class DiscountedPriorPeriod:
    """Assume the network was `factor` of its current size one period ago."""

    def __init__(self, factor: float = 0.9):
        self.factor = factor

    async def previous_size(self, user_id: UserId, current_size: int) -> int:
        return math.floor(current_size * self.factor)


class FixedConversionEstimator:
    """Flat assumed conversion rate, reported as a percentage of clicks."""

    def __init__(self, assumed_rate: float = 0.1):
        self.assumed_rate = assumed_rate

    def conversion_rate(self, total_clicks: int) -> float:
        return total_clicks * self.assumed_rate * 100


class FixedIndustryDistribution:
    """Same buckets for every user."""

    def __init__(self, buckets: dict[str, int] | None = None):
        self.buckets = dict(buckets or DEFAULT_INDUSTRY_BUCKETS)

    async def categorize(self, user_id: UserId) -> dict[str, int]:
        return dict(self.buckets)

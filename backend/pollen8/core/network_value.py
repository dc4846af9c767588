"""Network Value Calculator — pure mapping between connection counts and network value.

Invariants:
    - One connection is worth CONNECTION_VALUE (3.14); value = count × 3.14
    - Every monetary-style result is rounded to 2 decimals
    - calculate_connections_needed(calculate_network_value(n)) >= n for n >= 1
    - No IO, no clock, no randomness

Design Decisions:
    - Module-level functions over a calculator object: nothing to configure
    - calculate_growth_rate raises on a zero baseline instead of returning inf;
      services decide what a zero baseline means for their response
"""

import math

from pollen8.core.errors import InputValidationError

CONNECTION_VALUE = 3.14


def calculate_network_value(connection_count: int) -> float:
    """Value of a network with `connection_count` connections."""
    if connection_count < 0:
        raise InputValidationError(
            "connection_count must be non-negative", "connection_count",
        )
    return round(connection_count * CONNECTION_VALUE, 2)


def calculate_connections_needed(target_value: float) -> int:
    """Smallest connection count whose value reaches `target_value`."""
    return math.ceil(target_value / CONNECTION_VALUE)


def calculate_growth_rate(previous_value: float, current_value: float) -> float:
    """Percentage change from previous to current, 2 decimals."""
    if previous_value == 0:
        raise InputValidationError(
            "previous_value must be non-zero to compute a growth rate",
            "previous_value",
        )
    return round((current_value - previous_value) / previous_value * 100, 2)


def calculate_projected_growth(
    current_value: float, daily_growth_rate: float, days: int,
) -> float:
    """Compound `current_value` at `daily_growth_rate` percent for `days` days."""
    factor = 1 + daily_growth_rate / 100
    return round(current_value * factor ** days, 2)


def calculate_network_value_difference(
    connections_a: int, connections_b: int,
) -> float:
    """Absolute value gap between two networks."""
    diff = abs(
        calculate_network_value(connections_a)
        - calculate_network_value(connections_b),
    )
    return round(diff, 2)

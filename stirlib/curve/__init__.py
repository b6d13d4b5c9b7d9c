"""Daily curve construction."""

from .daily import (
    base_rate_for,
    build_daily_curve,
    cumulative_change_bps,
    is_turn_carry_day,
    last_business_day_table,
)
from .turns import TURN_TYPE_BY_MONTH, turn_premium_bps, turn_premium_pct, turn_type_for_month

__all__ = [
    "build_daily_curve",
    "base_rate_for",
    "cumulative_change_bps",
    "is_turn_carry_day",
    "last_business_day_table",
    "TURN_TYPE_BY_MONTH",
    "turn_type_for_month",
    "turn_premium_bps",
    "turn_premium_pct",
]

"""
Turn-premium bucket selection.

Every month-end turn falls in exactly one bucket. December is the year-end
turn even though it is also a month-end, and the March, June and September
month-ends are quarter-ends.
"""

from typing import Dict

from stirlib import config
from stirlib.schema import TurnPremiums, TurnType

TURN_TYPE_BY_MONTH: Dict[int, TurnType] = {
    1: TurnType.MONTH_END,
    2: TurnType.MONTH_END,
    3: TurnType.QUARTER_END,
    4: TurnType.MONTH_END,
    5: TurnType.MONTH_END,
    6: TurnType.QUARTER_END,
    7: TurnType.MONTH_END,
    8: TurnType.MONTH_END,
    9: TurnType.QUARTER_END,
    10: TurnType.MONTH_END,
    11: TurnType.MONTH_END,
    12: TurnType.YEAR_END,
}


def turn_type_for_month(month: int) -> TurnType:
    """Bucket for a month number (1-12)."""
    try:
        return TURN_TYPE_BY_MONTH[month]
    except KeyError:
        raise ValueError(f"Month must be in 1..12, got {month}") from None


def turn_premium_bps(turns: TurnPremiums, month: int) -> float:
    """Turn premium in basis points for a month's last business day."""
    turn_type = turn_type_for_month(month)
    if turn_type is TurnType.YEAR_END:
        return turns.year_end_bps
    if turn_type is TurnType.QUARTER_END:
        return turns.quarter_end_bps
    return turns.month_end_bps


def turn_premium_pct(turns: TurnPremiums, month: int) -> float:
    """Turn premium in percentage points, ready to add to a rate in percent."""
    return turn_premium_bps(turns, month) / config.BPS_PER_PERCENT

"""Data structures produced by the projection engine.

The daily curve is a sequence of ``DailyRate`` records, one per calendar day,
and the monthly aggregation is a sequence of ``MonthlyContract`` records. Rates
are in percent; the turn premium is reported in basis points with the exact
percentage-point value kept alongside it.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .enums import DayType


@dataclass(frozen=True)
class DailyRate:
    """One calendar day of the projected curve.

    Attributes:
        date: Calendar date
        day_type: Business, weekend or holiday
        base_rate: Starting rate plus all events dated before this day (%)
        turn_premium_pct: Turn premium in percentage points
        final_rate: Rate used for averaging (%)
        is_meeting_date: Day coincides with a rate-change event date
        is_turn: Turn premium is numerically non-zero
    """

    date: date
    day_type: DayType
    base_rate: float
    turn_premium_pct: float
    final_rate: float
    is_meeting_date: bool
    is_turn: bool

    @property
    def turn_premium(self) -> float:
        """Turn premium in basis points."""
        return self.turn_premium_pct * 100.0

    @property
    def is_business_day(self) -> bool:
        return self.day_type is DayType.BUSINESS


@dataclass(frozen=True)
class MonthlyContract:
    """Monthly futures-style aggregate.

    Attributes:
        month: Month index, 0 = January
        month_name: Short month name
        year: Calendar year
        avg_rate: Calendar-day mean of final rates (%)
        outright: 100 - avg_rate
        spread_1m: outright - next month's outright; None for the last month
        fly_1m: spread_1m - next month's spread_1m; None for the last two months
    """

    month: int
    month_name: str
    year: int
    avg_rate: float
    outright: float
    spread_1m: Optional[float] = None
    fly_1m: Optional[float] = None

"""
Core enumeration types for the projection engine.
"""

from enum import Enum


class DayType(Enum):
    """Calendar classification of a projected day."""

    BUSINESS = "Business"
    WEEKEND = "Weekend"
    HOLIDAY = "Holiday"


class TurnType(Enum):
    """Turn-premium bucket applied on a month's last business day."""

    MONTH_END = "MONTH_END"
    QUARTER_END = "QUARTER_END"
    YEAR_END = "YEAR_END"


class HolidaySource(Enum):
    """Where the holiday list comes from."""

    FALLBACK = "FALLBACK"
    QUANTLIB = "QUANTLIB"

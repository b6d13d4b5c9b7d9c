"""
Business-day calendar and holiday sources.
"""

from .calendar import HolidayCalendar
from .holidays import (
    FALLBACK_HOLIDAYS_2026,
    fallback_holidays,
    get_holidays,
    load_holidays_json,
    quantlib_holidays,
)

__all__ = [
    "HolidayCalendar",
    "FALLBACK_HOLIDAYS_2026",
    "fallback_holidays",
    "quantlib_holidays",
    "load_holidays_json",
    "get_holidays",
]

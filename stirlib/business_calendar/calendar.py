"""
Holiday-aware business-day calendar.

Weekends (Saturday/Sunday) and the supplied holiday dates are non-business
days. The calendar is a membership test only: it never validates holidays
against any official source.
"""

import logging
from datetime import date, datetime
from typing import Dict, FrozenSet, Iterable, Union

from dateutil.relativedelta import relativedelta

from stirlib.errors import CalendarConfigurationError
from stirlib.schema import DayType, Holiday
from stirlib.utils.date import get_month_end, is_weekend, to_date

logger = logging.getLogger(__name__)

HolidayLike = Union[Holiday, date, datetime, str]


def _holiday_date(item: HolidayLike) -> date:
    if isinstance(item, Holiday):
        return item.date
    return to_date(item)


class HolidayCalendar:
    """Weekend plus explicit-holiday calendar."""

    def __init__(self, holidays: Iterable[HolidayLike] = ()):
        """
        Initialize calendar.

        Args:
            holidays: Holiday objects, dates or 'YYYY-MM-DD' strings
        """
        self._holidays: FrozenSet[date] = frozenset(_holiday_date(h) for h in holidays)

    @classmethod
    def coerce(cls, holidays) -> "HolidayCalendar":
        """Return ``holidays`` unchanged if already a calendar, else wrap it."""
        if isinstance(holidays, cls):
            return holidays
        return cls(holidays or ())

    @property
    def holidays(self) -> FrozenSet[date]:
        return self._holidays

    def is_holiday(self, dt: date) -> bool:
        return dt in self._holidays

    def is_business_day(self, dt: date) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return not is_weekend(dt) and dt not in self._holidays

    def day_type(self, dt: date) -> DayType:
        # A holiday falling on a weekend is reported as a weekend
        if is_weekend(dt):
            return DayType.WEEKEND
        if dt in self._holidays:
            return DayType.HOLIDAY
        return DayType.BUSINESS

    def last_business_day(self, year: int, month: int) -> date:
        """
        Last business day of a month, scanning back from the calendar month-end.

        The scan never leaves the month.

        Raises:
            CalendarConfigurationError: If no day of the month is a business day
        """
        dt = get_month_end(year, month)
        while dt.month == month:
            if self.is_business_day(dt):
                return dt
            dt -= relativedelta(days=1)
        logger.error("No business day found in %s-%02d", year, month)
        raise CalendarConfigurationError(year, month)

    def last_business_days(self, year: int) -> Dict[int, date]:
        """Map of month number (1-12) to that month's last business day."""
        return {month: self.last_business_day(year, month) for month in range(1, 13)}

    def __contains__(self, dt: date) -> bool:
        return dt in self._holidays

    def __len__(self) -> int:
        return len(self._holidays)

    def __repr__(self) -> str:
        return f"HolidayCalendar({len(self._holidays)} holidays)"

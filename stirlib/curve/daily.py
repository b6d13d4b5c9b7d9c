"""
Daily overnight-rate curve builder.

Walks every calendar day of the projection year and assigns it a rate:

- Base rate: starting rate (EFFR if given, else SOFR) plus every rate-change
  event dated strictly before the day.
- Turn premium: added on each month's last business day, and carried onto the
  weekend day(s) immediately following it within the same month. A holiday
  following the anchor does not carry the premium.
- Other non-business days repeat the last business day's final rate; their
  premium is back-derived as final - base.
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Union

from dateutil.relativedelta import relativedelta

from stirlib import config
from stirlib.business_calendar import HolidayCalendar
from stirlib.schema import DailyRate, DayType, RateChangeEvent, Scenario
from stirlib.utils.date import SUNDAY, is_weekend, iter_days, year_bounds

from .turns import turn_premium_pct

logger = logging.getLogger(__name__)

ONE_DAY = relativedelta(days=1)
TWO_DAYS = relativedelta(days=2)


def cumulative_change_bps(events: Iterable[RateChangeEvent], day: date) -> float:
    """Sum of event changes dated strictly before ``day``."""
    total = 0.0
    for event in events:
        if event.date < day:
            total += event.change_bps
    return total


def base_rate_for(start_rate: float, events: Iterable[RateChangeEvent], day: date) -> float:
    """Starting rate plus cumulative event changes, in percent."""
    return start_rate + cumulative_change_bps(events, day) / config.BPS_PER_PERCENT


def last_business_day_table(calendar: HolidayCalendar, year: int) -> Dict[int, date]:
    """Turn anchor per month (1-12) for the projection year."""
    return calendar.last_business_days(year)


def is_turn_carry_day(day: date, anchor: date) -> bool:
    """
    True for a weekend day directly after its month's turn anchor.

    Saturday qualifies when the previous day is the anchor; Sunday qualifies
    when either of the two previous days is the anchor.
    """
    if not is_weekend(day):
        return False
    if day - ONE_DAY == anchor:
        return True
    return day.weekday() == SUNDAY and day - TWO_DAYS == anchor


def build_daily_curve(
    scenario: Scenario,
    holidays: Union[HolidayCalendar, Iterable, None] = None,
    year: Optional[int] = None,
    turn_tolerance: Optional[float] = None,
) -> List[DailyRate]:
    """
    Build one DailyRate per calendar day of the projection year.

    Args:
        scenario: Starting rates, event schedule and turn premiums
        holidays: HolidayCalendar, or Holiday objects / dates / ISO strings
        year: Projection year (defaults to config.DEFAULT_PROJECTION_YEAR)
        turn_tolerance: Premium magnitude (percentage points) at or below
            which a day is not flagged as a turn

    Returns:
        Daily records from January 1 to December 31 in ascending order

    Raises:
        CalendarConfigurationError: If some month has no business day
    """
    if year is None:
        year = config.DEFAULT_PROJECTION_YEAR
    if turn_tolerance is None:
        turn_tolerance = config.TURN_TOLERANCE_PCT

    calendar = HolidayCalendar.coerce(holidays)
    start_rate = scenario.starting_rate
    events = scenario.events
    meeting_dates = scenario.meeting_dates

    # Fails before any record is produced if a month has no business day
    anchors = last_business_day_table(calendar, year)
    logger.debug(
        "Projecting %d from %.4f%% with %d events, %d holidays; turn anchors: %s",
        year,
        start_rate,
        len(events),
        len(calendar),
        {m: d.isoformat() for m, d in anchors.items()},
    )

    rates: List[DailyRate] = []
    last_business_rate = start_rate
    first_day, last_day = year_bounds(year)

    for day in iter_days(first_day, last_day):
        day_type = calendar.day_type(day)
        base_rate = base_rate_for(start_rate, events, day)
        anchor = anchors[day.month]

        premium = 0.0
        turn_carry = False
        if day == anchor:
            premium = turn_premium_pct(scenario.turns, day.month)
        elif is_turn_carry_day(day, anchor):
            premium = turn_premium_pct(scenario.turns, day.month)
            turn_carry = True

        if day_type is DayType.BUSINESS:
            final_rate = base_rate + premium
            last_business_rate = final_rate
        elif turn_carry:
            final_rate = base_rate + premium
        else:
            final_rate = last_business_rate
            premium = final_rate - base_rate

        rates.append(
            DailyRate(
                date=day,
                day_type=day_type,
                base_rate=base_rate,
                turn_premium_pct=premium,
                final_rate=final_rate,
                is_meeting_date=day in meeting_dates,
                is_turn=abs(premium) > turn_tolerance,
            )
        )

    return rates

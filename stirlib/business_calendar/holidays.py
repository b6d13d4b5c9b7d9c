"""
Holiday sources.

Provides a static US holiday table, a QuantLib-backed US calendar lookup and a
JSON file loader. Each source returns a plain list of ``Holiday`` records that
the curve builder consumes as a membership set.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

import QuantLib as ql

from stirlib import config
from stirlib.schema import Holiday, HolidaySource

logger = logging.getLogger(__name__)


FALLBACK_HOLIDAYS_2026: List[Holiday] = [
    Holiday(date(2026, 1, 1), "New Year's Day", "New Year's Day"),
    Holiday(date(2026, 1, 19), "MLK Day", "Martin Luther King, Jr. Day"),
    Holiday(date(2026, 2, 16), "Presidents' Day", "Washington's Birthday"),
    Holiday(date(2026, 4, 3), "Good Friday", "Good Friday"),
    Holiday(date(2026, 5, 25), "Memorial Day", "Memorial Day"),
    Holiday(date(2026, 6, 19), "Juneteenth", "Juneteenth National Independence Day"),
    Holiday(date(2026, 7, 4), "Independence Day", "Independence Day"),
    Holiday(date(2026, 7, 3), "Independence Day (Observed)", "Independence Day"),
    Holiday(date(2026, 9, 7), "Labor Day", "Labor Day"),
    Holiday(date(2026, 10, 12), "Columbus Day", "Columbus Day"),
    Holiday(date(2026, 11, 11), "Veterans Day", "Veterans Day"),
    Holiday(date(2026, 11, 26), "Thanksgiving Day", "Thanksgiving Day"),
    Holiday(date(2026, 12, 25), "Christmas Day", "Christmas Day"),
]


def _to_ql_date(dt: date) -> ql.Date:
    """Convert Python date to QuantLib Date."""
    return ql.Date(dt.day, dt.month, dt.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def _us_markets() -> Dict[str, int]:
    # Market constants vary across QuantLib releases; only expose those present
    names = {
        "SOFR": "SOFR",
        "GOVERNMENTBOND": "GovernmentBond",
        "SETTLEMENT": "Settlement",
        "FEDERALRESERVE": "FederalReserve",
        "NYSE": "NYSE",
    }
    return {
        key: getattr(ql.UnitedStates, attr)
        for key, attr in names.items()
        if hasattr(ql.UnitedStates, attr)
    }


def quantlib_holidays(year: int, market: str = "SOFR") -> List[Holiday]:
    """
    Weekday holidays of QuantLib's UnitedStates calendar for one year.

    Args:
        year: Calendar year
        market: UnitedStates market name ("SOFR", "GOVERNMENTBOND", ...)

    Returns:
        Holidays in ascending date order
    """
    markets = _us_markets()
    key = market.upper().replace("_", "")
    if key not in markets:
        raise ValueError(
            f"Unknown US calendar market: {market}. Available: {list(markets.keys())}"
        )
    calendar = ql.UnitedStates(markets[key])

    holidays = []
    current = _to_ql_date(date(year, 1, 1))
    end = _to_ql_date(date(year, 12, 31))
    while current <= end:
        if calendar.isHoliday(current) and not calendar.isWeekend(current.weekday()):
            holidays.append(Holiday(_to_py_date(current), name=f"{calendar.name()} holiday"))
        current += 1

    logger.debug("QuantLib %s calendar: %d holidays in %d", calendar.name(), len(holidays), year)
    return holidays


def fallback_holidays(year: int) -> List[Holiday]:
    """Entries of the static table that fall in ``year``."""
    return [h for h in FALLBACK_HOLIDAYS_2026 if h.date.year == year]


def load_holidays_json(path: Union[str, Path]) -> List[Holiday]:
    """
    Load holidays from a JSON file.

    Accepts either a bare list of ``{"date", "localName", "name"}`` objects or
    an object with a ``"holidays"`` list.
    """
    with open(path, "r") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("holidays", [])
    return [Holiday.from_dict(item) for item in data]


def get_holidays(
    year: Optional[int] = None,
    source: Union[str, HolidaySource, None] = None,
    market: str = "SOFR",
) -> List[Holiday]:
    """
    Holiday list for a projection year from the requested source.

    An empty QuantLib result falls back to the static table.
    """
    if year is None:
        year = config.DEFAULT_PROJECTION_YEAR
    if source is None:
        source = config.DEFAULT_HOLIDAY_SOURCE
    if isinstance(source, str):
        try:
            source = HolidaySource(source.upper())
        except ValueError:
            raise ValueError(
                f"Unknown holiday source: {source}. "
                f"Available: {[s.value for s in HolidaySource]}"
            ) from None

    if source is HolidaySource.QUANTLIB:
        holidays = quantlib_holidays(year, market)
        if holidays:
            return holidays
        logger.warning("QuantLib returned no holidays for %d, using fallback table", year)

    holidays = fallback_holidays(year)
    if not holidays:
        logger.warning("Fallback holiday table has no entries for %d; weekends only", year)
    return holidays

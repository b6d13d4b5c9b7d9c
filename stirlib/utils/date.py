from typing import Iterator, Union
from datetime import datetime, date

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from stirlib.errors import DateParseError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

SATURDAY = 5
SUNDAY = 6


def to_date(date_like: Union[str, date, datetime]) -> date:
    """
    Convert a string, Timestamp or datetime to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise DateParseError(date_like)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(datetime_date: Union[str, date, datetime]) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(datetime_date).strftime(DATE_FMT)


def is_weekend(dt: date) -> bool:
    return dt.weekday() in (SATURDAY, SUNDAY)


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, 1) + relativedelta(day=31)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive."""
    dt = start
    while dt <= end:
        yield dt
        dt += relativedelta(days=1)


def year_bounds(year: int) -> tuple:
    """(Jan 1, Dec 31) of the given year."""
    return date(year, 1, 1), date(year, 12, 31)

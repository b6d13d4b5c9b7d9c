"""Shared date helpers."""

from .date import (
    DATE_FMT,
    datetime_to_str,
    get_month_end,
    is_weekend,
    iter_days,
    to_date,
    year_bounds,
)

__all__ = [
    "DATE_FMT",
    "to_date",
    "datetime_to_str",
    "is_weekend",
    "get_month_end",
    "iter_days",
    "year_bounds",
]

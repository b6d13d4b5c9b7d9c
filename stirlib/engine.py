"""
Projection pipeline.

Scenario + holidays -> daily curve -> monthly contracts, plus pandas views of
both sequences for downstream charting or reporting.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from stirlib.business_calendar import HolidayCalendar
from stirlib.contracts import aggregate_monthly
from stirlib.curve import build_daily_curve
from stirlib.schema import DailyRate, MonthlyContract, Scenario

logger = logging.getLogger(__name__)

DAILY_COLUMNS = [
    "date",
    "day_type",
    "is_business_day",
    "base_rate",
    "turn_premium",
    "final_rate",
    "is_meeting_date",
    "is_turn",
]

CONTRACT_COLUMNS = [
    "month",
    "month_name",
    "year",
    "avg_rate",
    "outright",
    "spread_1m",
    "fly_1m",
]


@dataclass(frozen=True)
class ProjectionResult:
    """Output of one projection run.

    Attributes:
        scenario: Scenario that was projected
        daily: Daily curve, one record per calendar day
        contracts: Monthly contracts in calendar order
    """

    scenario: Scenario
    daily: List[DailyRate]
    contracts: List[MonthlyContract]

    def daily_frame(self) -> pd.DataFrame:
        return daily_to_frame(self.daily)

    def contracts_frame(self) -> pd.DataFrame:
        return contracts_to_frame(self.contracts)


def project_scenario(
    scenario: Scenario,
    holidays: Optional[Iterable] = None,
    year: Optional[int] = None,
) -> ProjectionResult:
    """
    Run the daily curve builder and monthly aggregator for one scenario.

    Raises:
        CalendarConfigurationError: If some month has no business day
    """
    calendar = HolidayCalendar.coerce(holidays)
    daily = build_daily_curve(scenario, calendar, year)
    contracts = aggregate_monthly(daily)
    logger.info(
        "Projected scenario %r: %d days, %d contracts",
        scenario.name or scenario.scenario_id,
        len(daily),
        len(contracts),
    )
    return ProjectionResult(scenario=scenario, daily=daily, contracts=contracts)


def daily_to_frame(daily_rates: Sequence[DailyRate]) -> pd.DataFrame:
    """Daily curve as a DataFrame; turn_premium is in basis points."""
    rows = [
        {
            "date": pd.Timestamp(r.date),
            "day_type": r.day_type.value,
            "is_business_day": r.is_business_day,
            "base_rate": r.base_rate,
            "turn_premium": r.turn_premium,
            "final_rate": r.final_rate,
            "is_meeting_date": r.is_meeting_date,
            "is_turn": r.is_turn,
        }
        for r in daily_rates
    ]
    return pd.DataFrame(rows, columns=DAILY_COLUMNS)


def contracts_to_frame(contracts: Sequence[MonthlyContract]) -> pd.DataFrame:
    """Monthly contracts as a DataFrame; undefined spreads/flies become NaN."""
    rows = [
        {
            "month": c.month,
            "month_name": c.month_name,
            "year": c.year,
            "avg_rate": c.avg_rate,
            "outright": c.outright,
            "spread_1m": np.nan if c.spread_1m is None else c.spread_1m,
            "fly_1m": np.nan if c.fly_1m is None else c.fly_1m,
        }
        for c in contracts
    ]
    return pd.DataFrame(rows, columns=CONTRACT_COLUMNS)

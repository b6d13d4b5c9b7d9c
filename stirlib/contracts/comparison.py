"""Side-by-side comparison of two monthly contract strips."""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from stirlib.business_calendar import HolidayCalendar
from stirlib.curve import build_daily_curve
from stirlib.schema import MonthlyContract, Scenario

from .monthly import aggregate_monthly


@dataclass(frozen=True)
class ContractComparison:
    """One month of scenario A against scenario B.

    Attributes:
        month: Month index, 0 = January
        month_name: Short month name
        year: Calendar year
        outright_a: Scenario A outright
        outright_b: Scenario B outright
        outright_delta: outright_a - outright_b
        spread_a: Scenario A 1M spread, None for the last month
        spread_b: Scenario B 1M spread, None for the last month
        spread_delta: spread_a - spread_b, None unless both are defined
    """

    month: int
    month_name: str
    year: int
    outright_a: float
    outright_b: float
    outright_delta: float
    spread_a: Optional[float]
    spread_b: Optional[float]
    spread_delta: Optional[float]


def compare_contracts(
    contracts_a: Sequence[MonthlyContract], contracts_b: Sequence[MonthlyContract]
) -> List[ContractComparison]:
    """
    Pair months present in both strips and compute outright/spread deltas.
    """
    by_key_b = {(c.year, c.month): c for c in contracts_b}
    pairs = [(a, by_key_b[(a.year, a.month)]) for a in contracts_a if (a.year, a.month) in by_key_b]
    if not pairs:
        return []

    outrights_a = np.array([a.outright for a, _ in pairs], dtype=float)
    outrights_b = np.array([b.outright for _, b in pairs], dtype=float)
    outright_deltas = outrights_a - outrights_b

    rows = []
    for (a, b), delta in zip(pairs, outright_deltas):
        spread_delta = None
        if a.spread_1m is not None and b.spread_1m is not None:
            spread_delta = a.spread_1m - b.spread_1m
        rows.append(
            ContractComparison(
                month=a.month,
                month_name=a.month_name,
                year=a.year,
                outright_a=a.outright,
                outright_b=b.outright,
                outright_delta=float(delta),
                spread_a=a.spread_1m,
                spread_b=b.spread_1m,
                spread_delta=spread_delta,
            )
        )
    return rows


def compare_scenarios(
    scenario_a: Scenario,
    scenario_b: Scenario,
    holidays: Optional[Iterable] = None,
    year: Optional[int] = None,
) -> List[ContractComparison]:
    """Project both scenarios on the same holiday calendar and compare them."""
    calendar = HolidayCalendar.coerce(holidays)
    contracts_a = aggregate_monthly(build_daily_curve(scenario_a, calendar, year))
    contracts_b = aggregate_monthly(build_daily_curve(scenario_b, calendar, year))
    return compare_contracts(contracts_a, contracts_b)

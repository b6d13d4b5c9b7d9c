"""
Monthly contract aggregation.

Rolls the daily curve into one futures-style record per month. The average is
a plain calendar-day mean, so weekends and holidays weigh the same as business
days. Spreads and flies are first and second differences of the outright
series and are filled in only after every outright is known.
"""

import logging
from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from stirlib import config
from stirlib.schema import DailyRate, MonthlyContract

logger = logging.getLogger(__name__)


def _monthly_sums(daily_rates: Sequence[DailyRate]) -> Dict[Tuple[int, int], Tuple[float, int]]:
    sums: Dict[Tuple[int, int], Tuple[float, int]] = {}
    for rate in daily_rates:
        key = (rate.date.year, rate.date.month)
        total, count = sums.get(key, (0.0, 0))
        sums[key] = (total + rate.final_rate, count + 1)
    return sums


def aggregate_monthly(daily_rates: Sequence[DailyRate]) -> List[MonthlyContract]:
    """
    Aggregate daily rates into monthly contracts.

    Args:
        daily_rates: Daily curve, normally the output of build_daily_curve

    Returns:
        One contract per month present in the input, in calendar order.
        An empty input gives an empty list.
    """
    sums = _monthly_sums(daily_rates)

    contracts: List[MonthlyContract] = []
    for year, month in sorted(sums):
        total, count = sums[(year, month)]
        avg = total / count
        contracts.append(
            MonthlyContract(
                month=month - 1,
                month_name=config.MONTH_NAMES[month - 1],
                year=year,
                avg_rate=avg,
                outright=config.PRICE_BASE - avg,
            )
        )

    # Spread(m) = Outright(m) - Outright(m+1)
    for i in range(len(contracts) - 1):
        spread = contracts[i].outright - contracts[i + 1].outright
        contracts[i] = replace(contracts[i], spread_1m=spread)

    # Fly(m) = Spread(m) - Spread(m+1)
    for i in range(len(contracts) - 2):
        s1 = contracts[i].spread_1m
        s2 = contracts[i + 1].spread_1m
        if s1 is not None and s2 is not None:
            contracts[i] = replace(contracts[i], fly_1m=s1 - s2)

    logger.debug("Aggregated %d daily rates into %d contracts", len(daily_rates), len(contracts))
    return contracts

"""Default 2026 meeting calendar and base-case scenario."""

from datetime import date
from typing import List

from stirlib.schema import RateChangeEvent, Scenario, TurnPremiums

# FOMC decision dates; a change takes effect the following day
FED_MEETINGS_2026: List[date] = [
    date(2026, 1, 28),
    date(2026, 3, 18),
    date(2026, 4, 29),
    date(2026, 6, 17),
    date(2026, 7, 29),
    date(2026, 9, 16),
    date(2026, 10, 28),
    date(2026, 12, 9),
]


def default_meetings() -> List[RateChangeEvent]:
    """One unchanged (0 bps) event per scheduled meeting."""
    return [RateChangeEvent(date=d, change_bps=0.0) for d in FED_MEETINGS_2026]


def base_case_scenario() -> Scenario:
    return Scenario(
        base_sofr=4.30,
        base_effr=4.30,
        events=tuple(default_meetings()),
        turns=TurnPremiums(month_end_bps=5.0, quarter_end_bps=10.0, year_end_bps=25.0),
        name="Base Case 2026",
        scenario_id="default",
    )

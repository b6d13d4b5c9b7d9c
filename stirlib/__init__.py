"""Short-Term Interest Rate projection engine.

This package projects a daily overnight-rate path for one calendar year from a
starting rate, a schedule of rate-change events and month/quarter/year-end turn
premiums, then rolls it into monthly futures-style contract values.

Key modules:
- curve: Daily curve builder and turn-premium rules
- contracts: Monthly aggregation and scenario comparison
- calendar: Business-day calendar and holiday sources
- schema: Scenario and result data types
- engine: One-call projection pipeline and tabular views
"""

from .contracts import aggregate_monthly, compare_contracts, compare_scenarios
from .curve import build_daily_curve
from .engine import ProjectionResult, contracts_to_frame, daily_to_frame, project_scenario
from .errors import CalendarConfigurationError, DateParseError, ScenarioError, StirError
from .schema import (
    DailyRate,
    DayType,
    Holiday,
    MonthlyContract,
    RateChangeEvent,
    Scenario,
    TurnPremiums,
    TurnType,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Pipeline
    "project_scenario",
    "ProjectionResult",
    "daily_to_frame",
    "contracts_to_frame",
    # Core stages
    "build_daily_curve",
    "aggregate_monthly",
    "compare_contracts",
    "compare_scenarios",
    # Types
    "Scenario",
    "RateChangeEvent",
    "TurnPremiums",
    "Holiday",
    "DailyRate",
    "MonthlyContract",
    "DayType",
    "TurnType",
    # Errors
    "StirError",
    "CalendarConfigurationError",
    "DateParseError",
    "ScenarioError",
]

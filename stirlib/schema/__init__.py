"""
Input and result schemas for the projection engine.
"""

from .enums import DayType, HolidaySource, TurnType
from .results import DailyRate, MonthlyContract
from .scenario import Holiday, RateChangeEvent, Scenario, TurnPremiums

__all__ = [
    # Enums
    "DayType",
    "TurnType",
    "HolidaySource",
    # Inputs
    "Scenario",
    "RateChangeEvent",
    "TurnPremiums",
    "Holiday",
    # Results
    "DailyRate",
    "MonthlyContract",
]

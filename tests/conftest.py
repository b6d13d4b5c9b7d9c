"""
Pytest configuration and shared fixtures for stirlib tests.
"""
import sys
from datetime import date
from pathlib import Path

import pytest


def pytest_configure():
    """
    Ensure the repository root is on sys.path so `stirlib` imports without
    requiring an editable install.
    """
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


# =============================================================================
# Scenario Fixtures
# =============================================================================

@pytest.fixture
def flat_scenario():
    """SOFR 4.30, no events, no turn premiums."""
    from stirlib.schema import Scenario

    return Scenario(base_sofr=4.30)


@pytest.fixture
def march_hike_scenario():
    """+25bp decided on 2026-03-18, no turn premiums."""
    from stirlib.schema import RateChangeEvent, Scenario

    return Scenario(
        base_sofr=4.30,
        events=(RateChangeEvent(date(2026, 3, 18), 25),),
    )


@pytest.fixture
def turn_scenario():
    """No events; 5/10/25bp month/quarter/year-end turns."""
    from stirlib.schema import Scenario, TurnPremiums

    return Scenario(
        base_sofr=4.30,
        turns=TurnPremiums(month_end_bps=5, quarter_end_bps=10, year_end_bps=25),
    )


# =============================================================================
# Test Data Helpers
# =============================================================================

def make_daily(day: date, final_rate: float):
    """
    Create a business-day DailyRate with no turn premium.

    Usage:
        rate = make_daily(date(2026, 1, 2), 4.30)
    """
    from stirlib.schema import DailyRate, DayType

    return DailyRate(
        date=day,
        day_type=DayType.BUSINESS,
        base_rate=final_rate,
        turn_premium_pct=0.0,
        final_rate=final_rate,
        is_meeting_date=False,
        is_turn=False,
    )


def by_date(daily_rates):
    return {r.date: r for r in daily_rates}

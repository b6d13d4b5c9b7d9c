from datetime import date

import pandas as pd
import pytest

from stirlib import aggregate_monthly, compare_contracts, compare_scenarios, project_scenario
from stirlib.business_calendar import FALLBACK_HOLIDAYS_2026
from stirlib.engine import CONTRACT_COLUMNS, DAILY_COLUMNS
from stirlib.presets import FED_MEETINGS_2026, base_case_scenario, default_meetings
from stirlib.schema import RateChangeEvent


def test_project_base_case():
    result = project_scenario(base_case_scenario(), FALLBACK_HOLIDAYS_2026, year=2026)
    assert len(result.daily) == 365
    assert len(result.contracts) == 12
    assert result.scenario.name == "Base Case 2026"
    meeting_days = [r.date for r in result.daily if r.is_meeting_date]
    assert meeting_days == FED_MEETINGS_2026


def test_default_meetings_are_unchanged_decisions():
    events = default_meetings()
    assert [e.date for e in events] == FED_MEETINGS_2026
    assert all(e.change_bps == 0 for e in events)


def test_frames():
    result = project_scenario(base_case_scenario(), FALLBACK_HOLIDAYS_2026, year=2026)
    daily = result.daily_frame()
    contracts = result.contracts_frame()

    assert list(daily.columns) == DAILY_COLUMNS
    assert len(daily) == 365
    assert daily["date"].iloc[0] == pd.Timestamp("2026-01-01")
    assert daily["day_type"].iloc[0] == "Holiday"
    # Jan 1 holiday, Jan 2 Friday, Jan 3 Saturday
    assert daily["is_business_day"].iloc[:3].tolist() == [False, True, False]
    assert daily["is_business_day"].sum() == sum(1 for r in result.daily if r.day_type.value == "Business")

    assert list(contracts.columns) == CONTRACT_COLUMNS
    assert pd.isna(contracts["spread_1m"].iloc[-1])
    assert contracts["fly_1m"].iloc[-2:].isna().all()
    assert contracts["fly_1m"].iloc[:-2].notna().all()


def test_compare_identical_scenarios():
    rows = compare_scenarios(base_case_scenario(), base_case_scenario(), FALLBACK_HOLIDAYS_2026, year=2026)
    assert len(rows) == 12
    assert all(r.outright_delta == 0 for r in rows)
    assert all(r.spread_delta == 0 for r in rows[:-1])
    assert rows[-1].spread_a is None
    assert rows[-1].spread_delta is None


def test_compare_hike_against_base():
    base = base_case_scenario()
    hike = base.with_events([RateChangeEvent(date(2026, 3, 18), 25)])
    rows = compare_scenarios(base, hike, FALLBACK_HOLIDAYS_2026, year=2026)

    assert rows[0].outright_delta == pytest.approx(0.0)
    assert rows[2].outright_delta > 0
    assert rows[3].outright_delta == pytest.approx(0.25)
    assert rows[11].outright_delta == pytest.approx(0.25)


def test_compare_contracts_pairs_common_months():
    result = project_scenario(base_case_scenario(), FALLBACK_HOLIDAYS_2026, year=2026)
    full = result.contracts
    second_quarter = aggregate_monthly([r for r in result.daily if 4 <= r.date.month <= 6])
    rows = compare_contracts(full, second_quarter)
    assert [r.month_name for r in rows] == ["Apr", "May", "Jun"]
    # Jun has no spread in the truncated strip
    assert rows[-1].spread_b is None
    assert rows[-1].spread_delta is None
    assert compare_contracts(full, []) == []

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from stirlib.curve import turn_premium_bps, turn_type_for_month
from stirlib.errors import DateParseError, ScenarioError
from stirlib.schema import Holiday, RateChangeEvent, Scenario, TurnPremiums, TurnType
from stirlib.utils.date import get_month_end, to_date


def test_scenario_from_camel_case_dict():
    s = Scenario.from_dict(
        {
            "id": "s1",
            "name": "Cuts",
            "baseSofr": 4.30,
            "baseEffr": None,
            "meetings": [{"date": "2026-03-18", "hikeBps": -25}],
            "turns": {"monthEnd": 5, "quarterEnd": 10, "yearEnd": 25},
        }
    )
    assert s.starting_rate == 4.30
    assert s.events == (RateChangeEvent(date(2026, 3, 18), -25.0),)
    assert s.turns == TurnPremiums(5.0, 10.0, 25.0)
    assert (s.scenario_id, s.name) == ("s1", "Cuts")


def test_scenario_from_dict_events_and_bps_keys():
    s = Scenario.from_dict(
        {
            "startingSofr": "4.30",
            "baseEffr": 4.33,
            "events": [{"date": "20260429", "changeBps": 25}],
            "turns": {"monthEndBps": 3, "quarterEndBps": 8, "yearEndBps": 20},
        }
    )
    assert s.starting_rate == 4.33
    assert s.events[0].date == date(2026, 4, 29)
    assert s.turns.year_end_bps == 20.0


def test_scenario_requires_sofr():
    with pytest.raises(ScenarioError):
        Scenario.from_dict({"baseEffr": 4.33})
    with pytest.raises(ScenarioError):
        Scenario.from_dict({"baseSofr": "high"})


def test_scenario_bad_event_date():
    with pytest.raises(DateParseError):
        Scenario.from_dict({"baseSofr": 4.3, "events": [{"date": "18/03/2026", "changeBps": 25}]})


def test_scenario_is_frozen_and_stores_tuple():
    s = Scenario(base_sofr=4.30, events=[RateChangeEvent(date(2026, 3, 18), 25)])
    assert isinstance(s.events, tuple)
    with pytest.raises(FrozenInstanceError):
        s.base_sofr = 5.0


def test_to_dict_is_accepted_by_from_dict():
    s = Scenario(
        base_sofr=4.30,
        events=(RateChangeEvent(date(2026, 3, 18), 25),),
        turns=TurnPremiums(5, 10, 25),
        name="x",
    )
    assert Scenario.from_dict(s.to_dict()) == s


def test_turn_type_mapping():
    assert turn_type_for_month(12) is TurnType.YEAR_END
    assert [m for m in range(1, 13) if turn_type_for_month(m) is TurnType.QUARTER_END] == [3, 6, 9]
    assert turn_premium_bps(TurnPremiums(5, 10, 25), 12) == 25
    assert turn_premium_bps(TurnPremiums(5, 10, 25), 11) == 5
    with pytest.raises(ValueError):
        turn_type_for_month(13)


def test_date_helpers():
    assert to_date("2026-03-18") == date(2026, 3, 18)
    assert to_date("20260318") == date(2026, 3, 18)
    assert get_month_end(2026, 2) == date(2026, 2, 28)
    assert get_month_end(2028, 2) == date(2028, 2, 29)
    with pytest.raises(DateParseError):
        to_date("2026-3-XX")
    with pytest.raises(TypeError):
        to_date(20260318)


def test_string_dates_are_parsed_on_construction():
    assert RateChangeEvent("2026-03-18", 25).date == date(2026, 3, 18)
    assert RateChangeEvent("2026-03-18", 25) == RateChangeEvent(date(2026, 3, 18), 25)
    assert Holiday("20260529").date == date(2026, 5, 29)


def test_malformed_holiday_date_raises():
    with pytest.raises(DateParseError):
        Holiday("2026-02-30")
    with pytest.raises(DateParseError):
        RateChangeEvent("next March", 25)


def test_event_without_change_raises():
    with pytest.raises(ScenarioError):
        RateChangeEvent.from_dict({"date": "2026-03-18"})
    with pytest.raises(ScenarioError):
        RateChangeEvent.from_dict({"date": "2026-03-18", "changeBps": None})


def test_empty_events_list_falls_back_to_meetings():
    s = Scenario.from_dict(
        {
            "baseSofr": 4.30,
            "events": [],
            "meetings": [{"date": "2026-03-18", "hikeBps": 25}],
            "name": None,
            "id": None,
        }
    )
    assert s.events == (RateChangeEvent(date(2026, 3, 18), 25.0),)
    assert s.name == ""
    assert s.scenario_id == ""


def test_to_dict_writes_iso_dates():
    s = Scenario(base_sofr=4.30, events=(RateChangeEvent(date(2026, 3, 18), 25),))
    assert s.to_dict()["events"][0]["date"] == "2026-03-18"

    holiday = Holiday(date(2026, 1, 1), "New Year's Day", "New Year's Day")
    assert holiday.to_dict() == {"date": "2026-01-01", "localName": "New Year's Day", "name": "New Year's Day"}
    assert Holiday.from_dict(holiday.to_dict()) == holiday

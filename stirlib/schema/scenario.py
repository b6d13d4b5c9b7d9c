"""
Scenario input schemas.

A scenario is the full assumption set for one projection run: starting rates,
the rate-change event schedule and the turn premiums. All types are frozen so
the engine can never alter a caller's scenario.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from stirlib.errors import ScenarioError
from stirlib.utils.date import datetime_to_str, to_date


def _first(data: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_float(value, label: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ScenarioError(f"{label} must be numeric, got {value!r}") from None


@dataclass(frozen=True)
class RateChangeEvent:
    """A discrete shift in the overnight rate, effective the day after ``date``."""

    date: date
    change_bps: float

    def __post_init__(self):
        object.__setattr__(self, "date", to_date(self.date))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RateChangeEvent":
        if "date" not in data:
            raise ScenarioError(f"Rate change event without a date: {dict(data)!r}")
        change = _first(data, "changeBps", "change_bps", "hikeBps", "hike_bps")
        if change is None:
            raise ScenarioError(f"Rate change event without changeBps: {dict(data)!r}")
        return cls(date=to_date(data["date"]), change_bps=_as_float(change, "changeBps"))


@dataclass(frozen=True)
class TurnPremiums:
    """Turn add-ons in basis points.

    Attributes:
        month_end_bps: Applied on ordinary month-ends
        quarter_end_bps: Applied on March, June and September month-ends
        year_end_bps: Applied on the December month-end
    """

    month_end_bps: float = 0.0
    quarter_end_bps: float = 0.0
    year_end_bps: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TurnPremiums":
        data = data or {}
        return cls(
            month_end_bps=_as_float(_first(data, "monthEndBps", "monthEnd", "month_end_bps", default=0), "monthEndBps"),
            quarter_end_bps=_as_float(_first(data, "quarterEndBps", "quarterEnd", "quarter_end_bps", default=0), "quarterEndBps"),
            year_end_bps=_as_float(_first(data, "yearEndBps", "yearEnd", "year_end_bps", default=0), "yearEndBps"),
        )


@dataclass(frozen=True)
class Scenario:
    """One projection assumption set.

    Attributes:
        base_sofr: Starting SOFR in percent (e.g. 4.30)
        base_effr: Starting EFFR in percent; None means "use SOFR"
        events: Rate-change events, in the order supplied
        turns: Month/quarter/year-end turn premiums
        name: Display label
        scenario_id: Caller-side identifier
    """

    base_sofr: float
    base_effr: Optional[float] = None
    events: Tuple[RateChangeEvent, ...] = ()
    turns: TurnPremiums = field(default_factory=TurnPremiums)
    name: str = ""
    scenario_id: str = ""

    def __post_init__(self):
        # Accept any iterable of events but store an immutable tuple
        if not isinstance(self.events, tuple):
            object.__setattr__(self, "events", tuple(self.events))

    @property
    def starting_rate(self) -> float:
        """Rate before any event applies: EFFR when given, else SOFR."""
        return self.base_effr if self.base_effr is not None else self.base_sofr

    @property
    def meeting_dates(self) -> frozenset:
        return frozenset(e.date for e in self.events)

    def with_events(self, events: Iterable[RateChangeEvent]) -> "Scenario":
        """Copy of this scenario with a different event schedule."""
        return Scenario(
            base_sofr=self.base_sofr,
            base_effr=self.base_effr,
            events=tuple(events),
            turns=self.turns,
            name=self.name,
            scenario_id=self.scenario_id,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Scenario":
        """Build a scenario from its external (camelCase) representation."""
        sofr = _first(data, "baseSofr", "startingSofr", "base_sofr")
        if sofr is None:
            raise ScenarioError("Scenario requires a starting SOFR rate")
        effr = _first(data, "baseEffr", "startingEffr", "base_effr")
        # An empty "events" list does not hide a populated "meetings" list
        raw_events = data.get("events") or data.get("meetings") or []
        return cls(
            base_sofr=_as_float(sofr, "baseSofr"),
            base_effr=None if effr is None else _as_float(effr, "baseEffr"),
            events=tuple(RateChangeEvent.from_dict(e) for e in raw_events),
            turns=TurnPremiums.from_dict(_first(data, "turns", "turnPremiums")),
            name=str(data.get("name") or ""),
            scenario_id=str(data.get("id") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.scenario_id,
            "name": self.name,
            "baseSofr": self.base_sofr,
            "baseEffr": self.base_effr,
            "events": [
                {"date": datetime_to_str(e.date), "changeBps": e.change_bps} for e in self.events
            ],
            "turns": {
                "monthEndBps": self.turns.month_end_bps,
                "quarterEndBps": self.turns.quarter_end_bps,
                "yearEndBps": self.turns.year_end_bps,
            },
        }


@dataclass(frozen=True)
class Holiday:
    """A non-business date beyond ordinary weekends."""

    date: date
    local_name: str = ""
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "date", to_date(self.date))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Holiday":
        if "date" not in data:
            raise ScenarioError(f"Holiday entry without a date: {dict(data)!r}")
        return cls(
            date=to_date(data["date"]),
            local_name=str(_first(data, "localName", "local_name", default="")),
            name=str(data.get("name") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"date": datetime_to_str(self.date), "localName": self.local_name, "name": self.name}

"""Error types raised by the projection engine."""


class StirError(Exception):
    """Base class for all stirlib errors."""


class CalendarConfigurationError(StirError, ValueError):
    """Raised when a month has no business day to anchor its turn."""

    def __init__(self, year: int, month: int):
        self.year = year
        self.month = month
        super().__init__(
            f"No business day in {year}-{month:02d}: every calendar day is a weekend or holiday"
        )


class DateParseError(StirError, ValueError):
    """Raised when a date string cannot be parsed."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported date string format: {value!r}")


class ScenarioError(StirError, ValueError):
    """Raised when a scenario mapping is missing required fields."""

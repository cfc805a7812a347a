"""Value types produced and consumed by the comfort advisor."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .profiles import Season


class ErrorKind(Enum):
    """Input validation failures, listed in the order they are checked."""

    MISSING_FIELD = "missing_field"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    INVALID_TEMPERATURE = "invalid_temperature"
    INVALID_HUMIDITY = "invalid_humidity"


@dataclass(frozen=True)
class ValidationError:
    """A user-facing validation failure.

    This is a plain value, not an exception: it is returned inside a
    ComfortResult and never raised.
    """

    kind: ErrorKind
    message: str
    max_days: int | None = None


@dataclass(frozen=True)
class ComfortInput:
    """Validated calculator input."""

    month: int
    day: int
    outdoor_temp: float
    outdoor_humidity: float


@dataclass(frozen=True)
class Recommendation:
    """Recommended indoor conditions for a date and outdoor weather."""

    month: int
    day: int
    season: Season
    outdoor_temperature: float
    outdoor_humidity: float
    indoor_temperature: float
    indoor_humidity: float
    advice: str = ""

    @property
    def date_label(self) -> str:
        """Return the date as "7월 15일"."""
        return f"{self.month}월 {self.day}일"

    @property
    def indoor_temperature_display(self) -> str:
        """Return the indoor temperature with one decimal place."""
        return f"{self.indoor_temperature:.1f}"

    @property
    def indoor_humidity_display(self) -> str:
        """Return the indoor humidity as a whole number."""
        return f"{self.indoor_humidity:.0f}"

    def as_dict(self) -> dict[str, Any]:
        """Return the recommendation as a display record."""
        return {
            "date": self.date_label,
            "season": self.season.label,
            "outdoorConditions": {
                "temperature": self.outdoor_temperature,
                "humidity": self.outdoor_humidity,
            },
            "recommendedIndoor": {
                "temperature": self.indoor_temperature_display,
                "humidity": self.indoor_humidity_display,
            },
            "advice": self.advice,
        }


@dataclass(frozen=True)
class ComfortResult:
    """Outcome of a calculation: a recommendation or an error, never both."""

    recommendation: Recommendation | None = None
    error: ValidationError | None = None

    def __post_init__(self) -> None:
        if (self.recommendation is None) == (self.error is None):
            raise ValueError(
                "ComfortResult needs exactly one of recommendation or error"
            )

    @property
    def ok(self) -> bool:
        """Return True when a recommendation was produced."""
        return self.recommendation is not None

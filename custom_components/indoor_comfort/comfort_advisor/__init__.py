"""Pure domain logic for indoor comfort recommendations.

This package contains only pure functions with no external dependencies.
It can be tested independently and reused outside of Home Assistant.
"""

from .advisor import compute
from .calculations import (
    adjust_humidity,
    adjust_temperature,
    get_advice,
    get_days_in_month,
    get_season,
    get_season_profile,
    recommend,
)
from .models import (
    ComfortInput,
    ComfortResult,
    ErrorKind,
    Recommendation,
    ValidationError,
)
from .profiles import Season, SeasonProfile
from .validation import validate_inputs

__all__ = [
    "compute",
    "validate_inputs",
    "recommend",
    "get_days_in_month",
    "get_season",
    "get_season_profile",
    "adjust_temperature",
    "adjust_humidity",
    "get_advice",
    "ComfortInput",
    "ComfortResult",
    "ErrorKind",
    "Recommendation",
    "ValidationError",
    "Season",
    "SeasonProfile",
]

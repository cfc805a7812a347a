"""Entry point of the comfort advisor: raw input in, result out."""

from .calculations import recommend
from .models import ComfortResult, ValidationError
from .validation import RawValue, validate_inputs


def compute(
    month_raw: RawValue,
    day_raw: RawValue,
    temp_raw: RawValue,
    humidity_raw: RawValue,
) -> ComfortResult:
    """Validate raw input and compute the indoor comfort recommendation.

    Args:
        month_raw: Month as entered, 1-12.
        day_raw: Day of month as entered.
        temp_raw: Outdoor temperature in °C.
        humidity_raw: Outdoor relative humidity in %, 0-100.

    Returns:
        A ComfortResult holding either the recommendation or the first
        validation error. Identical input always yields an equal result.

    Example:
        >>> result = compute("7", "15", "33", "55")
        >>> result.recommendation.indoor_temperature_display
        '27.0'

    """
    validated = validate_inputs(month_raw, day_raw, temp_raw, humidity_raw)
    if isinstance(validated, ValidationError):
        return ComfortResult(error=validated)
    return ComfortResult(recommendation=recommend(validated))

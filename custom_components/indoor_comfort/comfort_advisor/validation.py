"""Validation of raw calculator input.

Raw values come straight from a form or a sensor: strings, numbers or
None. Checks run in a fixed order and stop at the first failure, which is
returned as a ValidationError value rather than raised.
"""

import math
import re

from .calculations import get_days_in_month
from .models import ComfortInput, ErrorKind, ValidationError

RawValue = str | int | float | None

MESSAGE_MISSING_FIELD = "모든 필드를 입력해주세요."
MESSAGE_INVALID_MONTH = "월은 1부터 12 사이의 숫자여야 합니다."
MESSAGE_INVALID_DAY = "일은 1부터 {max_days} 사이의 숫자여야 합니다."
MESSAGE_INVALID_TEMPERATURE = "온도는 숫자여야 합니다."
MESSAGE_INVALID_HUMIDITY = "습도는 0부터 100 사이의 숫자여야 합니다."

MIN_HUMIDITY = 0.0
MAX_HUMIDITY = 100.0

# Only a leading numeric prefix is read; trailing text is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _is_missing(value: RawValue) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_int(value: RawValue) -> int | None:
    """Parse the leading integer of a value, as in "7.5" -> 7.

    Returns None when the value does not start with an integer.
    """
    if isinstance(value, bool):
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _parse_float(value: RawValue) -> float | None:
    """Parse the leading finite real number of a value, as in "12,5" -> 12.0.

    Returns None when the value does not start with a number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_FLOAT.match(value)
        if not match:
            return None
        number = float(match.group(1))
    return number if math.isfinite(number) else None


def validate_inputs(
    month_raw: RawValue,
    day_raw: RawValue,
    temp_raw: RawValue,
    humidity_raw: RawValue,
) -> ComfortInput | ValidationError:
    """Validate raw input in priority order.

    Returns:
        A ComfortInput when every field is valid, otherwise the
        ValidationError for the first failing check.

    """
    raw_values = (month_raw, day_raw, temp_raw, humidity_raw)
    if any(_is_missing(value) for value in raw_values):
        return ValidationError(ErrorKind.MISSING_FIELD, MESSAGE_MISSING_FIELD)

    month = _parse_int(month_raw)
    if month is None or not 1 <= month <= 12:
        return ValidationError(ErrorKind.INVALID_MONTH, MESSAGE_INVALID_MONTH)

    max_days = get_days_in_month(month)
    day = _parse_int(day_raw)
    if day is None or not 1 <= day <= max_days:
        return ValidationError(
            ErrorKind.INVALID_DAY,
            MESSAGE_INVALID_DAY.format(max_days=max_days),
            max_days=max_days,
        )

    outdoor_temp = _parse_float(temp_raw)
    if outdoor_temp is None:
        return ValidationError(
            ErrorKind.INVALID_TEMPERATURE, MESSAGE_INVALID_TEMPERATURE
        )

    outdoor_humidity = _parse_float(humidity_raw)
    if (
        outdoor_humidity is None
        or not MIN_HUMIDITY <= outdoor_humidity <= MAX_HUMIDITY
    ):
        return ValidationError(ErrorKind.INVALID_HUMIDITY, MESSAGE_INVALID_HUMIDITY)

    return ComfortInput(
        month=month,
        day=day,
        outdoor_temp=outdoor_temp,
        outdoor_humidity=outdoor_humidity,
    )

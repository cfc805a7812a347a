"""Pure domain logic for indoor comfort recommendations.

This module contains only pure functions with no external dependencies.
All functions are synchronous and can be tested without any mocking.

A recommendation is built in three steps:
- The month is classified into a season, which selects a baseline profile
- The baseline is nudged by outdoor temperature and humidity extremes,
  clamped to the season's allowed range
- Advisory text is attached for exceptional weather

Each adjustment is an ordered first-match chain. Ranges overlap (a reading
above 30 is also above 25), so the order of the checks matters.
"""

from .models import ComfortInput, Recommendation
from .profiles import (
    ADVICE_EXTREME_COLD,
    ADVICE_HEATWAVE,
    ADVICE_HIGH_HUMIDITY,
    ADVICE_LOW_HUMIDITY,
    COOL_THRESHOLD,
    DAYS_IN_MONTH,
    DEFAULT_DAYS_IN_MONTH,
    DRY_THRESHOLD,
    EXTREME_COLD_THRESHOLD,
    FREEZING_THRESHOLD,
    HEATWAVE_THRESHOLD,
    HOT_THRESHOLD,
    HUMID_THRESHOLD,
    HUMIDITY_STEP,
    MAJOR_TEMP_STEP,
    MINOR_TEMP_STEP,
    SEASON_PROFILES,
    VERY_DRY_THRESHOLD,
    VERY_HUMID_THRESHOLD,
    WARM_THRESHOLD,
    Season,
    SeasonProfile,
)


def get_days_in_month(month: int) -> int:
    """Return the number of days allowed for a month.

    February always allows 29 days. Unknown months fall back to 31.
    """
    return DAYS_IN_MONTH.get(month, DEFAULT_DAYS_IN_MONTH)


def get_season(month: int) -> Season:
    """Classify a month (1-12) into a season.

    Example:
        >>> get_season(7)
        <Season.SUMMER: '여름'>

    """
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.AUTUMN
    return Season.WINTER


def get_season_profile(season: Season) -> SeasonProfile:
    """Return the baseline profile for a season."""
    return SEASON_PROFILES[season]


def adjust_temperature(outdoor_temp: float, profile: SeasonProfile) -> float:
    """Derive the indoor temperature target from the outdoor temperature.

    Strong extremes (above 30°C or below 0°C) shift the baseline by a full
    degree, mild ones (above 25°C or below 5°C) by half a degree. The
    result is clamped to the season's temperature range.

    Args:
        outdoor_temp: Outdoor temperature in °C.
        profile: Season profile supplying baseline and range.

    Returns:
        Recommended indoor temperature in °C.

    """
    low, high = profile.temp_range
    base = profile.base_temp

    if outdoor_temp > HOT_THRESHOLD:
        return min(high, base + MAJOR_TEMP_STEP)
    elif outdoor_temp < FREEZING_THRESHOLD:
        return max(low, base + MAJOR_TEMP_STEP)
    elif outdoor_temp > WARM_THRESHOLD:
        return min(high, base + MINOR_TEMP_STEP)
    elif outdoor_temp < COOL_THRESHOLD:
        return max(low, base + MINOR_TEMP_STEP)
    return base


def adjust_humidity(outdoor_humidity: float, profile: SeasonProfile) -> float:
    """Derive the indoor humidity target from the outdoor humidity.

    Humid air outside lowers the target, dry air raises it. The thresholds
    are strict, so exactly 70% or 30% leaves the baseline untouched.
    """
    low, high = profile.humidity_range
    base = profile.base_humidity

    if outdoor_humidity > HUMID_THRESHOLD:
        return max(low, base - HUMIDITY_STEP)
    elif outdoor_humidity < DRY_THRESHOLD:
        return min(high, base + HUMIDITY_STEP)
    return base


def get_advice(season: Season, outdoor_temp: float, outdoor_humidity: float) -> str:
    """Return advisory text for exceptional weather, or an empty string."""
    if season is Season.SUMMER and outdoor_temp > HEATWAVE_THRESHOLD:
        return ADVICE_HEATWAVE
    elif season is Season.WINTER and outdoor_temp < EXTREME_COLD_THRESHOLD:
        return ADVICE_EXTREME_COLD
    elif outdoor_humidity > VERY_HUMID_THRESHOLD:
        return ADVICE_HIGH_HUMIDITY
    elif outdoor_humidity < VERY_DRY_THRESHOLD:
        return ADVICE_LOW_HUMIDITY
    return ""


def recommend(comfort_input: ComfortInput) -> Recommendation:
    """Build a recommendation from already validated input."""
    season = get_season(comfort_input.month)
    profile = get_season_profile(season)

    return Recommendation(
        month=comfort_input.month,
        day=comfort_input.day,
        season=season,
        outdoor_temperature=comfort_input.outdoor_temp,
        outdoor_humidity=comfort_input.outdoor_humidity,
        indoor_temperature=adjust_temperature(comfort_input.outdoor_temp, profile),
        indoor_humidity=adjust_humidity(comfort_input.outdoor_humidity, profile),
        advice=get_advice(
            season, comfort_input.outdoor_temp, comfort_input.outdoor_humidity
        ),
    )

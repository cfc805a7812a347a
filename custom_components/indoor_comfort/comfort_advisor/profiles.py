"""Fixed lookup tables for indoor comfort recommendations.

Everything here is a read-only module-level constant; nothing is derived
per call.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Season(Enum):
    """Season of the year, labelled in Korean for display."""

    SPRING = "봄"
    SUMMER = "여름"
    AUTUMN = "가을"
    WINTER = "겨울"

    @property
    def label(self) -> str:
        """Return the display label."""
        return self.value


class SeasonProfile(NamedTuple):
    """Baseline indoor targets and allowed ranges for one season."""

    base_temp: float
    base_humidity: float
    temp_range: tuple[float, float]
    humidity_range: tuple[float, float]


# February is fixed at 29 days; there is no leap-year handling
DAYS_IN_MONTH: Mapping[int, int] = MappingProxyType(
    {
        1: 31,
        2: 29,
        3: 31,
        4: 30,
        5: 31,
        6: 30,
        7: 31,
        8: 31,
        9: 30,
        10: 31,
        11: 30,
        12: 31,
    }
)
DEFAULT_DAYS_IN_MONTH = 31

SEASON_PROFILES: Mapping[Season, SeasonProfile] = MappingProxyType(
    {
        Season.SPRING: SeasonProfile(22.0, 50.0, (20.0, 24.0), (40.0, 60.0)),
        Season.SUMMER: SeasonProfile(26.0, 50.0, (24.0, 28.0), (40.0, 60.0)),
        Season.AUTUMN: SeasonProfile(22.0, 50.0, (20.0, 24.0), (40.0, 60.0)),
        Season.WINTER: SeasonProfile(20.0, 40.0, (18.0, 22.0), (30.0, 50.0)),
    }
)

# Outdoor temperature thresholds (°C)
HOT_THRESHOLD = 30.0
FREEZING_THRESHOLD = 0.0
WARM_THRESHOLD = 25.0
COOL_THRESHOLD = 5.0

# Outdoor humidity thresholds (%)
HUMID_THRESHOLD = 70.0
DRY_THRESHOLD = 30.0

# Adjustment steps
MAJOR_TEMP_STEP = 1.0
MINOR_TEMP_STEP = 0.5
HUMIDITY_STEP = 5.0

# Advisory thresholds
HEATWAVE_THRESHOLD = 32.0
EXTREME_COLD_THRESHOLD = -5.0
VERY_HUMID_THRESHOLD = 80.0
VERY_DRY_THRESHOLD = 20.0

ADVICE_HEATWAVE = (
    "폭염 상황에서는 실내 온도를 더 낮게 유지하고 충분한 수분 섭취를 권장합니다."
)
ADVICE_EXTREME_COLD = (
    "혹한 상황에서는 실내 온도를 약간 높게 유지하고 난방 시 가습기 사용을 권장합니다."
)
ADVICE_HIGH_HUMIDITY = "외부 습도가 매우 높으니 제습기 사용을 권장합니다."
ADVICE_LOW_HUMIDITY = "외부 습도가 매우 낮으니 가습기 사용을 권장합니다."

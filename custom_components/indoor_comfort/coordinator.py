"""DataUpdateCoordinator for indoor_comfort."""

import logging

from homeassistant.const import (
    ATTR_UNIT_OF_MEASUREMENT,
    STATE_UNAVAILABLE,
    STATE_UNKNOWN,
    UnitOfTemperature,
)
from homeassistant.core import HomeAssistant, State
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed
from homeassistant.util import dt as dt_util
from homeassistant.util.unit_conversion import TemperatureConverter

from .comfort_advisor import Recommendation, compute
from .const import DOMAIN, SCAN_INTERVAL

_LOGGER = logging.getLogger(__name__)


class ComfortDataUpdateCoordinator(DataUpdateCoordinator[Recommendation]):
    """Class to compute the indoor comfort recommendation."""

    def __init__(
        self,
        hass: HomeAssistant,
        temp_entity: str,
        humidity_entity: str,
        entry_id: str,
    ):
        """Initialize."""
        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            update_interval=SCAN_INTERVAL,
        )
        self.temp_entity = temp_entity
        self.humidity_entity = humidity_entity
        self.entry_id = entry_id

        _LOGGER.info(
            "Initialized ComfortDataUpdateCoordinator with temperature sensor %s "
            "and humidity sensor %s",
            temp_entity,
            humidity_entity,
        )

    def _read_state(self, entity_id: str) -> State | None:
        """Return the state of an entity, or None when it has no usable value."""
        state = self.hass.states.get(entity_id)
        if state is None or state.state in (STATE_UNAVAILABLE, STATE_UNKNOWN):
            _LOGGER.debug("No usable state for %s", entity_id)
            return None
        return state

    def _read_temperature_celsius(self) -> str | float | None:
        """Return the outdoor temperature, converted to °C when possible."""
        state = self._read_state(self.temp_entity)
        if state is None:
            return None

        raw = state.state
        unit = state.attributes.get(ATTR_UNIT_OF_MEASUREMENT)
        if unit in (None, UnitOfTemperature.CELSIUS):
            return raw

        try:
            value = float(raw)
        except ValueError:
            # Left for the advisor to report as a non-numeric temperature
            return raw

        celsius = TemperatureConverter.convert(value, unit, UnitOfTemperature.CELSIUS)
        _LOGGER.debug("Converted %.1f%s to %.1f°C", value, unit, celsius)
        return celsius

    async def _async_update_data(self) -> Recommendation:
        """Compute the recommendation for today and the current readings."""
        today = dt_util.now().date()
        temperature = self._read_temperature_celsius()
        humidity_state = self._read_state(self.humidity_entity)
        humidity = humidity_state.state if humidity_state else None

        _LOGGER.debug(
            "Computing comfort recommendation for %s (temperature=%s, humidity=%s)",
            today.isoformat(),
            temperature,
            humidity,
        )

        result = compute(today.month, today.day, temperature, humidity)
        if not result.ok:
            _LOGGER.debug(
                "Comfort recommendation unavailable: %s (%s)",
                result.error.message,
                result.error.kind.value,
            )
            raise UpdateFailed(result.error.message)

        recommendation = result.recommendation
        _LOGGER.debug(
            "Recommended indoor %s°C / %s%% for %s (%s)",
            recommendation.indoor_temperature_display,
            recommendation.indoor_humidity_display,
            recommendation.date_label,
            recommendation.season.label,
        )
        return recommendation

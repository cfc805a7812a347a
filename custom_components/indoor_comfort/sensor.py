"""Sensor platform for Indoor Comfort Advisor integration."""

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .comfort_advisor import Recommendation, Season
from .const import (
    ATTR_ADVICE,
    ATTR_DATE,
    ATTR_OUTDOOR_HUMIDITY,
    ATTR_OUTDOOR_TEMPERATURE,
    DEFAULT_NAME,
    DOMAIN,
    NO_ADVICE,
    SENSOR_TYPE_ADVICE,
    SENSOR_TYPE_RECOMMENDED_HUMIDITY,
    SENSOR_TYPE_RECOMMENDED_TEMPERATURE,
    SENSOR_TYPE_SEASON,
)
from .coordinator import ComfortDataUpdateCoordinator

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ComfortSensorEntityDescription(SensorEntityDescription):
    """Describes an Indoor Comfort Advisor sensor."""

    value_fn: Callable[[Recommendation], Any]


SENSOR_DESCRIPTIONS: tuple[ComfortSensorEntityDescription, ...] = (
    ComfortSensorEntityDescription(
        key=SENSOR_TYPE_RECOMMENDED_TEMPERATURE,
        name="Recommended Indoor Temperature",
        device_class=SensorDeviceClass.TEMPERATURE,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=UnitOfTemperature.CELSIUS,
        suggested_display_precision=1,
        icon="mdi:home-thermometer",
        value_fn=lambda rec: rec.indoor_temperature,
    ),
    ComfortSensorEntityDescription(
        key=SENSOR_TYPE_RECOMMENDED_HUMIDITY,
        name="Recommended Indoor Humidity",
        device_class=SensorDeviceClass.HUMIDITY,
        state_class=SensorStateClass.MEASUREMENT,
        native_unit_of_measurement=PERCENTAGE,
        suggested_display_precision=0,
        icon="mdi:water-percent",
        value_fn=lambda rec: rec.indoor_humidity,
    ),
    ComfortSensorEntityDescription(
        key=SENSOR_TYPE_SEASON,
        name="Season",
        device_class=SensorDeviceClass.ENUM,
        options=[season.label for season in Season],
        icon="mdi:calendar-range",
        value_fn=lambda rec: rec.season.label,
    ),
    ComfortSensorEntityDescription(
        key=SENSOR_TYPE_ADVICE,
        name="Comfort Advice",
        icon="mdi:information-outline",
        value_fn=lambda rec: rec.advice or NO_ADVICE,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the sensor platform."""
    coordinator: ComfortDataUpdateCoordinator = hass.data[DOMAIN][entry.entry_id]

    entities = [
        ComfortSensor(coordinator, entry, description)
        for description in SENSOR_DESCRIPTIONS
    ]
    _LOGGER.debug("Adding %d comfort sensors", len(entities))
    async_add_entities(entities)


class ComfortSensor(CoordinatorEntity[ComfortDataUpdateCoordinator], SensorEntity):
    """Sensor exposing one field of the comfort recommendation."""

    entity_description: ComfortSensorEntityDescription
    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: ComfortDataUpdateCoordinator,
        entry: ConfigEntry,
        description: ComfortSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self.entity_description = description
        self._attr_unique_id = f"{entry.entry_id}_{description.key}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": DEFAULT_NAME,
        }

    @property
    def native_value(self) -> Any:
        """Return the state of the sensor."""
        if self.coordinator.data is None:
            return None
        return self.entity_description.value_fn(self.coordinator.data)

    @property
    def extra_state_attributes(self) -> dict[str, Any] | None:
        """Return the outdoor conditions the recommendation is based on."""
        recommendation = self.coordinator.data
        if recommendation is None:
            return None
        attributes = {
            ATTR_DATE: recommendation.date_label,
            ATTR_OUTDOOR_TEMPERATURE: recommendation.outdoor_temperature,
            ATTR_OUTDOOR_HUMIDITY: recommendation.outdoor_humidity,
        }
        if self.entity_description.key == SENSOR_TYPE_ADVICE:
            attributes[ATTR_ADVICE] = recommendation.advice
        return attributes

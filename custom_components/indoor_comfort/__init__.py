"""The Indoor Comfort Advisor integration."""

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import Event, EventStateChangedData, HomeAssistant, callback
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.event import async_track_state_change_event

from .const import CONF_HUMIDITY_SENSOR, CONF_TEMPERATURE_SENSOR, DOMAIN
from .coordinator import ComfortDataUpdateCoordinator

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.SENSOR]


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Indoor Comfort Advisor from a config entry."""
    _LOGGER.info(
        "Setting up Indoor Comfort Advisor integration with ID: %s",
        entry.entry_id,
    )

    temp_entity = entry.data[CONF_TEMPERATURE_SENSOR]
    humidity_entity = entry.data[CONF_HUMIDITY_SENSOR]

    _LOGGER.debug(
        "Configuration: temperature_sensor=%s, humidity_sensor=%s",
        temp_entity,
        humidity_entity,
    )

    try:
        coordinator = ComfortDataUpdateCoordinator(
            hass=hass,
            temp_entity=temp_entity,
            humidity_entity=humidity_entity,
            entry_id=entry.entry_id,
        )

        _LOGGER.debug("Performing initial data refresh for coordinator")
        await coordinator.async_config_entry_first_refresh()

        hass.data.setdefault(DOMAIN, {})
        hass.data[DOMAIN][entry.entry_id] = coordinator

        @callback
        def async_outdoor_state_changed(event: Event[EventStateChangedData]) -> None:
            """Recompute when an outdoor reading changes."""
            if event.data["new_state"] is None:
                return
            _LOGGER.debug(
                "Outdoor sensor %s changed, triggering coordinator refresh",
                event.data["entity_id"],
            )
            hass.async_create_task(coordinator.async_request_refresh())

        entry.async_on_unload(
            async_track_state_change_event(
                hass, [temp_entity, humidity_entity], async_outdoor_state_changed
            )
        )
        _LOGGER.debug(
            "Registered state change listener for %s and %s",
            temp_entity,
            humidity_entity,
        )

        _LOGGER.debug("Setting up platforms: %s", PLATFORMS)
        await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

        _LOGGER.info("Indoor Comfort Advisor integration setup completed successfully")
        return True

    except ConfigEntryNotReady:
        # Outdoor sensors not reporting yet; Home Assistant retries the setup
        raise
    except Exception as ex:
        _LOGGER.exception(
            "Error setting up Indoor Comfort Advisor integration: %s",
            str(ex),
        )
        return False


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.info(
        "Unloading Indoor Comfort Advisor integration with ID: %s",
        entry.entry_id,
    )

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        _LOGGER.debug("Successfully unloaded platforms")
        hass.data[DOMAIN].pop(entry.entry_id)
        _LOGGER.info("Integration unloaded successfully")
    else:
        _LOGGER.warning("Failed to unload one or more platforms")

    return unload_ok

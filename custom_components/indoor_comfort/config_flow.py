"""Config flow for Indoor Comfort Advisor integration."""

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.components.sensor import SensorDeviceClass
from homeassistant.helpers import selector

from .const import CONF_HUMIDITY_SENSOR, CONF_TEMPERATURE_SENSOR, DEFAULT_NAME, DOMAIN

_LOGGER = logging.getLogger(__name__)


def _build_schema(current: dict[str, Any] | None = None) -> vol.Schema:
    """Return the sensor selection schema, pre-filled from current values."""
    current = current or {}
    return vol.Schema(
        {
            vol.Required(
                CONF_TEMPERATURE_SENSOR,
                default=current.get(CONF_TEMPERATURE_SENSOR, vol.UNDEFINED),
            ): selector.EntitySelector(
                selector.EntitySelectorConfig(
                    domain=["sensor"],
                    device_class=SensorDeviceClass.TEMPERATURE,
                ),
            ),
            vol.Required(
                CONF_HUMIDITY_SENSOR,
                default=current.get(CONF_HUMIDITY_SENSOR, vol.UNDEFINED),
            ): selector.EntitySelector(
                selector.EntitySelectorConfig(
                    domain=["sensor"],
                    device_class=SensorDeviceClass.HUMIDITY,
                ),
            ),
        }
    )


class ComfortConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Indoor Comfort Advisor."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle the initial step."""
        errors = {}

        if user_input is not None:
            errors = self._validate_input(user_input)

            if not errors:
                await self.async_set_unique_id(self._unique_id_for(user_input))
                self._abort_if_unique_id_configured()

                _LOGGER.debug("Creating integration with title: %s", DEFAULT_NAME)

                return self.async_create_entry(
                    title=DEFAULT_NAME,
                    data=user_input,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=_build_schema(user_input),
            errors=errors,
        )

    async def async_step_reconfigure(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle reconfiguration of an existing entry."""
        entry = self._get_entry_for_reconfigure()
        if not entry:
            return self.async_abort(reason="entry_not_found")

        errors = {}

        if user_input is not None:
            errors = self._validate_input(user_input)

            if not errors:
                _LOGGER.debug(
                    "Reconfiguring integration with sensors %s and %s",
                    user_input[CONF_TEMPERATURE_SENSOR],
                    user_input[CONF_HUMIDITY_SENSOR],
                )

                self.hass.config_entries.async_update_entry(
                    entry,
                    data=user_input,
                    unique_id=self._unique_id_for(user_input),
                )

                # Reload the integration to apply changes
                await self.hass.config_entries.async_reload(entry.entry_id)

                return self.async_abort(reason="reconfigure_successful")

        return self.async_show_form(
            step_id="reconfigure",
            data_schema=_build_schema(user_input or dict(entry.data)),
            errors=errors,
        )

    def _get_entry_for_reconfigure(self) -> config_entries.ConfigEntry | None:
        """Get the config entry being reconfigured."""
        entry_id = self.context.get("entry_id")
        if entry_id:
            return self.hass.config_entries.async_get_entry(entry_id)
        return None

    @staticmethod
    def _unique_id_for(user_input: dict[str, Any]) -> str:
        """Return a unique id for a temperature/humidity sensor pair."""
        return (
            f"{user_input[CONF_TEMPERATURE_SENSOR]}_{user_input[CONF_HUMIDITY_SENSOR]}"
        )

    def _validate_input(self, user_input: dict[str, Any]) -> dict[str, str]:
        """Validate both sensors, returning form errors."""
        errors = {}
        if not self._validate_sensor(
            user_input[CONF_TEMPERATURE_SENSOR], SensorDeviceClass.TEMPERATURE
        ):
            errors["base"] = "invalid_temperature_sensor"
        elif not self._validate_sensor(
            user_input[CONF_HUMIDITY_SENSOR], SensorDeviceClass.HUMIDITY
        ):
            errors["base"] = "invalid_humidity_sensor"
        return errors

    def _validate_sensor(self, entity_id: str, device_class: SensorDeviceClass) -> bool:
        """Validate the sensor entity exists."""
        state = self.hass.states.get(entity_id)
        if not state:
            return False

        # A device class mismatch is allowed but reported
        if state.attributes.get("device_class") != device_class:
            _LOGGER.warning(
                "Entity %s does not appear to be a %s sensor (device_class=%s)",
                entity_id,
                device_class,
                state.attributes.get("device_class"),
            )

        return True

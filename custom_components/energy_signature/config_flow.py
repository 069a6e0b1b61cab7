"""Config flow for Energy Signature integration."""

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.helpers import selector

from .const import (
    CONF_ANNUALIZED_BASELINE,
    CONF_AREA,
    CONF_AREA_UNIT,
    CONF_ENERGY_UNIT,
    CONF_LOW_FIT_THRESHOLD,
    DEFAULT_ANNUALIZED_BASELINE,
    DEFAULT_AREA,
    DEFAULT_AREA_UNIT,
    DEFAULT_ENERGY_UNIT,
    DEFAULT_LOW_FIT_THRESHOLD,
    DEFAULT_NAME,
    DOMAIN,
)
from .signature import AREA_UNITS, ENERGY_UNITS, InvalidAreaError, parse_area

_LOGGER = logging.getLogger(__name__)


def _build_schema(current: dict[str, Any]) -> vol.Schema:
    """Return the form schema pre-filled with the current values."""
    return vol.Schema(
        {
            vol.Required(
                CONF_AREA, default=str(current.get(CONF_AREA, DEFAULT_AREA))
            ): selector.TextSelector(),
            vol.Required(
                CONF_AREA_UNIT,
                default=current.get(CONF_AREA_UNIT, DEFAULT_AREA_UNIT),
            ): selector.SelectSelector(
                selector.SelectSelectorConfig(options=list(AREA_UNITS))
            ),
            vol.Required(
                CONF_ENERGY_UNIT,
                default=current.get(CONF_ENERGY_UNIT, DEFAULT_ENERGY_UNIT),
            ): selector.SelectSelector(
                selector.SelectSelectorConfig(options=list(ENERGY_UNITS))
            ),
            vol.Required(
                CONF_LOW_FIT_THRESHOLD,
                default=current.get(CONF_LOW_FIT_THRESHOLD, DEFAULT_LOW_FIT_THRESHOLD),
            ): vol.All(vol.Coerce(float), vol.Range(min=0.0, max=1.0)),
            vol.Required(
                CONF_ANNUALIZED_BASELINE,
                default=current.get(
                    CONF_ANNUALIZED_BASELINE, DEFAULT_ANNUALIZED_BASELINE
                ),
            ): selector.BooleanSelector(),
        }
    )


def _validate_input(user_input: dict[str, Any]) -> dict[str, str]:
    """Return form errors for the submitted values."""
    errors = {}
    try:
        parse_area(user_input[CONF_AREA])
    except InvalidAreaError:
        errors[CONF_AREA] = "invalid_area"
    return errors


class EnergySignatureConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Energy Signature."""

    VERSION = 1

    async def async_step_user(self, user_input=None):
        """Handle the initial step."""
        errors = {}

        if user_input is not None:
            errors = _validate_input(user_input)

            if not errors:
                _LOGGER.debug(
                    "Creating integration for %s %s in %s",
                    user_input[CONF_AREA],
                    user_input[CONF_AREA_UNIT],
                    user_input[CONF_ENERGY_UNIT],
                )
                return self.async_create_entry(title=DEFAULT_NAME, data=user_input)

        return self.async_show_form(
            step_id="user",
            data_schema=_build_schema(user_input or {}),
            errors=errors,
        )

    async def async_step_reconfigure(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle reconfiguration of an existing entry.

        The entry is updated in place; the update listener pushes the new
        settings to the running coordinator so the monthly table survives.
        """
        entry = self._get_reconfigure_entry()
        errors = {}

        if user_input is not None:
            errors = _validate_input(user_input)

            if not errors:
                _LOGGER.debug("Reconfiguring entry %s", entry.entry_id)
                self.hass.config_entries.async_update_entry(entry, data=user_input)
                return self.async_abort(reason="reconfigure_successful")

        return self.async_show_form(
            step_id="reconfigure",
            data_schema=_build_schema(user_input or dict(entry.data)),
            errors=errors,
        )

"""The Energy Signature integration."""

import logging

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers import config_validation as cv

from .const import (
    ATTR_CDD,
    ATTR_CONFIG_ENTRY_ID,
    ATTR_ENERGY,
    ATTR_HDD,
    ATTR_MONTH,
    ATTR_ROW_ID,
    ATTR_ROWS,
    ATTR_YEAR,
    DOMAIN,
    SERVICE_ADD_ROW,
    SERVICE_CLEAR_ROWS,
    SERVICE_COMPUTE,
    SERVICE_LOAD_ROWS,
    SERVICE_LOAD_SAMPLE,
    SERVICE_REMOVE_ROW,
    SERVICE_UPDATE_ROW,
)
from .coordinator import SignatureCoordinator, snapshot_as_dict
from .repairs import async_delete_advisory_issues

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.SENSOR]

ROW_FIELDS = (ATTR_YEAR, ATTR_MONTH, ATTR_ENERGY, ATTR_HDD, ATTR_CDD)

# Row values are free text; validation happens at compute time
ROW_SCHEMA = vol.Schema(
    {vol.Optional(field): vol.Any(None, cv.string) for field in ROW_FIELDS}
)

SERVICE_SCHEMA_ENTRY = vol.Schema({vol.Required(ATTR_CONFIG_ENTRY_ID): cv.string})

SERVICE_SCHEMA_ADD_ROW = SERVICE_SCHEMA_ENTRY.extend(ROW_SCHEMA.schema)

SERVICE_SCHEMA_UPDATE_ROW = SERVICE_SCHEMA_ENTRY.extend(
    {vol.Required(ATTR_ROW_ID): cv.positive_int, **ROW_SCHEMA.schema}
)

SERVICE_SCHEMA_REMOVE_ROW = SERVICE_SCHEMA_ENTRY.extend(
    {vol.Required(ATTR_ROW_ID): cv.positive_int}
)

SERVICE_SCHEMA_LOAD_ROWS = SERVICE_SCHEMA_ENTRY.extend(
    {vol.Required(ATTR_ROWS): vol.All(cv.ensure_list, [ROW_SCHEMA])}
)


def _get_coordinator(hass: HomeAssistant, call: ServiceCall) -> SignatureCoordinator:
    """Return the coordinator targeted by a service call."""
    entry_id = call.data[ATTR_CONFIG_ENTRY_ID]
    coordinator = hass.data.get(DOMAIN, {}).get(entry_id)
    if coordinator is None:
        raise ServiceValidationError(f"Unknown config entry {entry_id}")
    return coordinator


def _row_values(call: ServiceCall) -> dict:
    return {field: call.data[field] for field in ROW_FIELDS if field in call.data}


def _async_register_services(hass: HomeAssistant) -> None:
    """Register the table and compute services once for the domain."""
    if hass.services.has_service(DOMAIN, SERVICE_COMPUTE):
        return

    async def handle_add_row(call: ServiceCall) -> ServiceResponse:
        """Handle the add row service call."""
        row_id = _get_coordinator(hass, call).async_add_row(_row_values(call))
        return {ATTR_ROW_ID: row_id}

    async def handle_update_row(call: ServiceCall) -> None:
        """Handle the update row service call."""
        _get_coordinator(hass, call).async_update_row(
            call.data[ATTR_ROW_ID], _row_values(call)
        )

    async def handle_remove_row(call: ServiceCall) -> None:
        """Handle the remove row service call."""
        if not _get_coordinator(hass, call).async_remove_row(call.data[ATTR_ROW_ID]):
            raise ServiceValidationError("The last row of the table cannot be removed")

    async def handle_clear_rows(call: ServiceCall) -> None:
        """Handle the clear rows service call."""
        _get_coordinator(hass, call).async_clear_rows()

    async def handle_load_rows(call: ServiceCall) -> None:
        """Handle the load rows service call."""
        _get_coordinator(hass, call).async_load_rows(call.data[ATTR_ROWS])

    async def handle_load_sample(call: ServiceCall) -> None:
        """Handle the load sample service call."""
        _get_coordinator(hass, call).async_load_sample()

    async def handle_compute(call: ServiceCall) -> ServiceResponse:
        """Handle the compute service call."""
        snapshot = _get_coordinator(hass, call).async_compute()
        return snapshot_as_dict(snapshot)

    hass.services.async_register(
        DOMAIN,
        SERVICE_ADD_ROW,
        handle_add_row,
        schema=SERVICE_SCHEMA_ADD_ROW,
        supports_response=SupportsResponse.OPTIONAL,
    )
    hass.services.async_register(
        DOMAIN, SERVICE_UPDATE_ROW, handle_update_row, schema=SERVICE_SCHEMA_UPDATE_ROW
    )
    hass.services.async_register(
        DOMAIN, SERVICE_REMOVE_ROW, handle_remove_row, schema=SERVICE_SCHEMA_REMOVE_ROW
    )
    hass.services.async_register(
        DOMAIN, SERVICE_CLEAR_ROWS, handle_clear_rows, schema=SERVICE_SCHEMA_ENTRY
    )
    hass.services.async_register(
        DOMAIN, SERVICE_LOAD_ROWS, handle_load_rows, schema=SERVICE_SCHEMA_LOAD_ROWS
    )
    hass.services.async_register(
        DOMAIN, SERVICE_LOAD_SAMPLE, handle_load_sample, schema=SERVICE_SCHEMA_ENTRY
    )
    hass.services.async_register(
        DOMAIN,
        SERVICE_COMPUTE,
        handle_compute,
        schema=SERVICE_SCHEMA_ENTRY,
        supports_response=SupportsResponse.OPTIONAL,
    )
    _LOGGER.debug("Registered %s services", DOMAIN)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Energy Signature from a config entry."""
    _LOGGER.info(
        "Setting up Energy Signature integration with ID: %s", entry.entry_id
    )

    coordinator = SignatureCoordinator(hass, entry)
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = coordinator

    entry.async_on_unload(entry.add_update_listener(async_update_entry))

    _async_register_services(hass)

    _LOGGER.debug("Setting up platforms: %s", PLATFORMS)
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    _LOGGER.info("Energy Signature integration setup completed successfully")
    return True


async def async_update_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Push reconfigured settings to the running coordinator."""
    coordinator: SignatureCoordinator = hass.data[DOMAIN][entry.entry_id]
    coordinator.apply_entry_data(entry.data)
    coordinator.async_update_listeners()


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    _LOGGER.info("Unloading Energy Signature integration with ID: %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unload_ok:
        _LOGGER.debug("Successfully unloaded platforms")
        hass.data[DOMAIN].pop(entry.entry_id)
        async_delete_advisory_issues(hass, entry.entry_id)

        if not hass.data[DOMAIN]:
            for service in list(hass.services.async_services_for_domain(DOMAIN)):
                hass.services.async_remove(DOMAIN, service)
        _LOGGER.info("Integration unloaded successfully")
    else:
        _LOGGER.warning("Failed to unload one or more platforms")

    return unload_ok

"""DataUpdateCoordinator for energy_signature.

The coordinator never polls. It owns the monthly table being edited through
services and the store holding the last computed result, and publishes a new
snapshot to the sensors each time a computation succeeds.
"""

from dataclasses import asdict
import logging
from typing import Any, Iterable, Mapping

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import ServiceValidationError
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

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
    DOMAIN,
)
from .repairs import async_sync_advisory_issues
from .signature import (
    ObservationTable,
    ResultSnapshot,
    ResultStore,
    SignatureError,
    SignatureOptions,
)
from .signature.sample_data import SAMPLE_OBSERVATIONS

_LOGGER = logging.getLogger(__name__)


def options_from_entry_data(data: Mapping[str, Any]) -> SignatureOptions:
    """Build engine options from config entry data."""
    return SignatureOptions(
        area_unit=data.get(CONF_AREA_UNIT, DEFAULT_AREA_UNIT),
        energy_unit=data.get(CONF_ENERGY_UNIT, DEFAULT_ENERGY_UNIT),
        low_fit_threshold=data.get(CONF_LOW_FIT_THRESHOLD, DEFAULT_LOW_FIT_THRESHOLD),
        annualized_baseline=data.get(
            CONF_ANNUALIZED_BASELINE, DEFAULT_ANNUALIZED_BASELINE
        ),
    )


class SignatureCoordinator(DataUpdateCoordinator[ResultSnapshot | None]):
    """Class to manage the monthly table and the computed energy signature."""

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry) -> None:
        """Initialize."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=entry,
            name=DOMAIN,
            update_interval=None,
        )
        self.entry_id = entry.entry_id
        self.table = ObservationTable()
        self.store = ResultStore()
        self.area: str = DEFAULT_AREA
        self.options = SignatureOptions()
        self.apply_entry_data(entry.data)

    def apply_entry_data(self, data: Mapping[str, Any]) -> None:
        """Take over area and options from the config entry.

        The current result is kept until the next computation.
        """
        self.area = str(data.get(CONF_AREA, DEFAULT_AREA))
        self.options = options_from_entry_data(data)
        _LOGGER.debug(
            "Configuration: area=%s %s, energy_unit=%s, low_fit_threshold=%.2f, "
            "annualized_baseline=%s",
            self.area,
            self.options.area_unit,
            self.options.energy_unit,
            self.options.low_fit_threshold,
            "Yes" if self.options.annualized_baseline else "No",
        )

    async def _async_update_data(self) -> ResultSnapshot | None:
        """Return the current snapshot; results only change on compute."""
        return self.store.current

    @property
    def is_stale(self) -> bool:
        """Return True when the table changed after the last computation."""
        return self.store.is_stale(self.table)

    @callback
    def async_add_row(self, values: Mapping[str, Any] | None = None) -> int:
        """Append a row to the table and return its id."""
        row_id = self.table.add_row(values)
        _LOGGER.debug("Added row %d", row_id)
        self.async_update_listeners()
        return row_id

    @callback
    def async_update_row(self, row_id: int, values: Mapping[str, Any]) -> None:
        """Change some fields of an existing row."""
        try:
            self.table.update_row(row_id, **values)
        except KeyError as err:
            raise ServiceValidationError(f"Unknown row id {row_id}") from err
        self.async_update_listeners()

    @callback
    def async_remove_row(self, row_id: int) -> bool:
        """Remove a row, keeping at least one in the table."""
        try:
            removed = self.table.remove_row(row_id)
        except KeyError as err:
            raise ServiceValidationError(f"Unknown row id {row_id}") from err
        if removed:
            self.async_update_listeners()
        return removed

    @callback
    def async_clear_rows(self) -> None:
        """Reset the table to a single blank row."""
        self.table.clear()
        self.async_update_listeners()

    @callback
    def async_load_rows(self, rows: Iterable[Any]) -> None:
        """Replace the table content."""
        self.table.load(rows)
        _LOGGER.debug("Loaded %d rows", len(self.table))
        self.async_update_listeners()

    @callback
    def async_load_sample(self) -> None:
        """Replace the table content with the reference dataset."""
        self.async_load_rows(SAMPLE_OBSERVATIONS)

    @callback
    def async_compute(self) -> ResultSnapshot:
        """Compute a new result and publish it.

        Raises:
            ServiceValidationError: If the area or the data are invalid. The
                previously published result stays in place.

        """
        try:
            snapshot = self.store.compute(self.table, self.area, self.options)
        except SignatureError as err:
            _LOGGER.warning("Energy signature computation failed: %s", err)
            raise ServiceValidationError(str(err)) from err

        async_sync_advisory_issues(self.hass, self.entry_id, snapshot.result)
        self.async_set_updated_data(snapshot)
        return snapshot


def snapshot_as_dict(snapshot: ResultSnapshot) -> dict[str, Any]:
    """Serialize a snapshot into a service response."""
    result = snapshot.result
    return {
        "version": snapshot.version,
        "intensity_unit": result.intensity_unit,
        "model": asdict(result.model),
        "formula": result.model.formula(result.energy_unit),
        "baseline_eui": result.baseline_eui,
        "baseline_trend_pct": result.baseline_trend_pct,
        "total_savings": result.total_savings,
        "advisories": sorted(advisory.value for advisory in result.advisories),
        "annual_report": [asdict(year) for year in result.annual_report],
        "records": [asdict(record) for record in result.records],
    }

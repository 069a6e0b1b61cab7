"""Sensor platform for Energy Signature integration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import asdict, dataclass
import logging
from typing import Any

from homeassistant.components.sensor import (
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import (
    ATTR_ADVISORIES,
    ATTR_ANNUAL_REPORT,
    ATTR_FORMULA,
    ATTR_RESULT_VERSION,
    ATTR_STALE,
    ATTR_YEAR_LABEL,
    DOMAIN,
    SENSOR_TYPE_BASELINE_EUI,
    SENSOR_TYPE_BASELINE_TREND,
    SENSOR_TYPE_BASELOAD,
    SENSOR_TYPE_BLC,
    SENSOR_TYPE_LATEST_ACTUAL_EUI,
    SENSOR_TYPE_LATEST_ENPI,
    SENSOR_TYPE_R_SQUARED,
)
from .coordinator import SignatureCoordinator
from .signature import SignatureOptions, SignatureResult

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SignatureSensorEntityDescription(SensorEntityDescription):
    """Describes an Energy Signature sensor."""

    value_fn: Callable[[SignatureResult], float | None]
    unit_fn: Callable[[SignatureOptions], str | None] = lambda options: None
    latest_year: bool = False


def _latest_enpi(result: SignatureResult) -> float | None:
    latest = result.latest_year
    return latest.normalized_enpi if latest else None


def _latest_actual_eui(result: SignatureResult) -> float | None:
    latest = result.latest_year
    return latest.actual_eui if latest else None


SENSOR_DESCRIPTIONS: tuple[SignatureSensorEntityDescription, ...] = (
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_BLC,
        translation_key=SENSOR_TYPE_BLC,
        value_fn=lambda result: result.model.slope,
        unit_fn=lambda options: f"{options.energy_unit}/TDD",
        suggested_display_precision=2,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_BASELOAD,
        translation_key=SENSOR_TYPE_BASELOAD,
        value_fn=lambda result: result.model.intercept,
        unit_fn=lambda options: f"{options.energy_unit}/month",
        suggested_display_precision=0,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_R_SQUARED,
        translation_key=SENSOR_TYPE_R_SQUARED,
        value_fn=lambda result: result.model.r_squared,
        suggested_display_precision=3,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_BASELINE_EUI,
        translation_key=SENSOR_TYPE_BASELINE_EUI,
        value_fn=lambda result: result.baseline_eui,
        unit_fn=lambda options: options.intensity_unit,
        suggested_display_precision=1,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_LATEST_ENPI,
        translation_key=SENSOR_TYPE_LATEST_ENPI,
        value_fn=_latest_enpi,
        unit_fn=lambda options: options.intensity_unit,
        suggested_display_precision=1,
        latest_year=True,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_LATEST_ACTUAL_EUI,
        translation_key=SENSOR_TYPE_LATEST_ACTUAL_EUI,
        value_fn=_latest_actual_eui,
        unit_fn=lambda options: options.intensity_unit,
        suggested_display_precision=1,
        latest_year=True,
    ),
    SignatureSensorEntityDescription(
        key=SENSOR_TYPE_BASELINE_TREND,
        translation_key=SENSOR_TYPE_BASELINE_TREND,
        value_fn=lambda result: result.baseline_trend_pct,
        unit_fn=lambda options: PERCENTAGE,
        suggested_display_precision=1,
        latest_year=True,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the Energy Signature sensors."""
    coordinator: SignatureCoordinator = hass.data[DOMAIN][entry.entry_id]

    _LOGGER.debug("Adding %d sensors for %s", len(SENSOR_DESCRIPTIONS), entry.title)
    async_add_entities(
        SignatureSensor(coordinator, entry, description)
        for description in SENSOR_DESCRIPTIONS
    )


class SignatureSensor(CoordinatorEntity[SignatureCoordinator], SensorEntity):
    """Sensor exposing one figure of the last computed energy signature."""

    entity_description: SignatureSensorEntityDescription
    _attr_has_entity_name = True
    _attr_state_class = SensorStateClass.MEASUREMENT

    def __init__(
        self,
        coordinator: SignatureCoordinator,
        entry: ConfigEntry,
        description: SignatureSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self.entity_description = description
        self.entry = entry
        self._attr_unique_id = f"{entry.entry_id}_{description.key}"

    @property
    def device_info(self):
        """Return device information."""
        return {
            "identifiers": {(DOMAIN, self.entry.entry_id)},
            "name": self.entry.title,
            "manufacturer": "Energy Signature",
        }

    @property
    def _result(self) -> SignatureResult | None:
        snapshot = self.coordinator.data
        return snapshot.result if snapshot else None

    @property
    def native_value(self) -> float | None:
        """Return the sensor value, unknown before the first computation."""
        result = self._result
        if result is None:
            return None
        return self.entity_description.value_fn(result)

    @property
    def native_unit_of_measurement(self) -> str | None:
        """Return the unit of the stored result, or of the current options."""
        result = self._result
        if result is not None:
            options = SignatureOptions(
                area_unit=result.area_unit, energy_unit=result.energy_unit
            )
        else:
            options = self.coordinator.options
        return self.entity_description.unit_fn(options)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return the context of the computed figure."""
        attributes: dict[str, Any] = {ATTR_STALE: self.coordinator.is_stale}
        snapshot = self.coordinator.data
        if snapshot is None:
            return attributes

        result = snapshot.result
        attributes[ATTR_RESULT_VERSION] = snapshot.version
        attributes[ATTR_ADVISORIES] = sorted(
            advisory.value for advisory in result.advisories
        )

        key = self.entity_description.key
        if key in (SENSOR_TYPE_BLC, SENSOR_TYPE_BASELOAD, SENSOR_TYPE_R_SQUARED):
            attributes[ATTR_FORMULA] = result.model.formula(result.energy_unit)
            attributes["variance_explained_pct"] = round(
                result.model.variance_explained_pct, 1
            )
        elif key == SENSOR_TYPE_BASELINE_EUI:
            attributes[ATTR_ANNUAL_REPORT] = [
                asdict(year) for year in result.annual_report
            ]
        elif self.entity_description.latest_year and result.latest_year:
            attributes[ATTR_YEAR_LABEL] = result.latest_year.year

        return attributes

"""Constants for the Energy Signature integration."""

from .signature.options import (
    AREA_UNITS,
    ENERGY_UNITS,
    LOW_FIT_THRESHOLD,
)

DOMAIN = "energy_signature"

# Configuration
CONF_AREA = "area"
CONF_AREA_UNIT = "area_unit"
CONF_ENERGY_UNIT = "energy_unit"
CONF_LOW_FIT_THRESHOLD = "low_fit_threshold"
CONF_ANNUALIZED_BASELINE = "annualized_baseline"

DEFAULT_NAME = "Energy Signature"
DEFAULT_AREA = "10000"
DEFAULT_AREA_UNIT = AREA_UNITS[0]
DEFAULT_ENERGY_UNIT = ENERGY_UNITS[0]
DEFAULT_LOW_FIT_THRESHOLD = LOW_FIT_THRESHOLD
DEFAULT_ANNUALIZED_BASELINE = False

# Services
SERVICE_ADD_ROW = "add_row"
SERVICE_UPDATE_ROW = "update_row"
SERVICE_REMOVE_ROW = "remove_row"
SERVICE_CLEAR_ROWS = "clear_rows"
SERVICE_LOAD_ROWS = "load_rows"
SERVICE_LOAD_SAMPLE = "load_sample"
SERVICE_COMPUTE = "compute"

ATTR_CONFIG_ENTRY_ID = "config_entry_id"
ATTR_ROW_ID = "row_id"
ATTR_ROWS = "rows"
ATTR_YEAR = "year"
ATTR_MONTH = "month"
ATTR_ENERGY = "energy"
ATTR_HDD = "hdd"
ATTR_CDD = "cdd"

# Sensor attributes
ATTR_ANNUAL_REPORT = "annual_report"
ATTR_ADVISORIES = "advisories"
ATTR_FORMULA = "formula"
ATTR_RESULT_VERSION = "result_version"
ATTR_STALE = "stale"
ATTR_YEAR_LABEL = "year"

# Sensor types
SENSOR_TYPE_BLC = "building_load_coefficient"
SENSOR_TYPE_BASELOAD = "baseload"
SENSOR_TYPE_R_SQUARED = "r_squared"
SENSOR_TYPE_BASELINE_EUI = "baseline_eui"
SENSOR_TYPE_LATEST_ENPI = "latest_enpi"
SENSOR_TYPE_LATEST_ACTUAL_EUI = "latest_actual_eui"
SENSOR_TYPE_BASELINE_TREND = "baseline_trend"

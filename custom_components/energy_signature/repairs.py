"""Repairs platform for Energy Signature integration.

Advisories of the last computation are surfaced as repair issues. They never
block the computation; acknowledging an issue dismisses it until a later
computation raises it again.
"""

from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant import data_entry_flow
from homeassistant.components.repairs import ConfirmRepairFlow, RepairsFlow
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers import issue_registry as ir

from .const import DOMAIN
from .signature import Advisory, SignatureResult

_LOGGER = logging.getLogger(__name__)

ADVISORY_ISSUES = {
    Advisory.LOW_FIT: "low_fit",
    Advisory.DEGENERATE_MODEL: "degenerate_model",
}


def issue_id_for(advisory: Advisory, entry_id: str) -> str:
    """Return the issue id of an advisory for a config entry."""
    return f"{ADVISORY_ISSUES[advisory]}_{entry_id}"


@callback
def async_sync_advisory_issues(
    hass: HomeAssistant, entry_id: str, result: SignatureResult
) -> None:
    """Create issues for the result's advisories and delete the others."""
    for advisory in Advisory:
        issue_id = issue_id_for(advisory, entry_id)
        if advisory not in result.advisories:
            ir.async_delete_issue(hass, DOMAIN, issue_id)
            continue

        _LOGGER.debug("Raising repair issue %s", issue_id)
        ir.async_create_issue(
            hass,
            DOMAIN,
            issue_id,
            is_fixable=True,
            severity=ir.IssueSeverity.WARNING,
            translation_key=ADVISORY_ISSUES[advisory],
            translation_placeholders={
                "r_squared": f"{result.model.r_squared:.3f}",
                "rows": str(len(result.records)),
            },
            data={
                "entry_id": entry_id,
                "advisory": advisory.value,
                "r_squared": round(result.model.r_squared, 3),
            },
        )


@callback
def async_delete_advisory_issues(hass: HomeAssistant, entry_id: str) -> None:
    """Delete every advisory issue of a config entry."""
    for advisory in Advisory:
        ir.async_delete_issue(hass, DOMAIN, issue_id_for(advisory, entry_id))


async def async_create_fix_flow(
    hass: HomeAssistant,
    issue_id: str,
    data: dict[str, str | int | float | None] | None,
) -> RepairsFlow:
    """Create flow."""
    if data and data.get("advisory") in {advisory.value for advisory in Advisory}:
        return AdvisoryRepairFlow(hass, data)

    return ConfirmRepairFlow()


class AdvisoryRepairFlow(RepairsFlow):
    """Handler acknowledging a model advisory."""

    def __init__(
        self, hass: HomeAssistant, data: dict[str, str | int | float | None]
    ) -> None:
        """Initialize the repair flow."""
        super().__init__()
        self.hass = hass
        self.entry_id = data.get("entry_id")
        self.advisory = Advisory(data["advisory"])
        self.r_squared = data.get("r_squared")

    async def async_step_init(
        self, user_input: dict[str, str] | None = None
    ) -> data_entry_flow.FlowResult:
        """Handle the first step of a fix flow."""
        entry = self.hass.config_entries.async_get_entry(self.entry_id)
        if not entry:
            return self.async_abort(reason="entry_not_found")

        if user_input is not None:
            _LOGGER.info(
                "Advisory %s acknowledged for entry %s",
                self.advisory.value,
                self.entry_id,
            )
            return self.async_create_entry(title="", data={})

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema({}),
            description_placeholders={
                "title": entry.title,
                "r_squared": str(self.r_squared),
            },
        )

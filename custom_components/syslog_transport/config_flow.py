"""Config flow for the syslog_transport integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult
from homeassistant.const import CONF_HOST, CONF_PORT

from .const import CONF_DIALECT, DOMAIN
from .syslog.const import DEFAULT_DIALECT, SYSLOG_DATA_SCHEMA
from .syslog.sender import validate as syslog_validate

_LOGGER = logging.getLogger(__name__)


class SyslogTransportConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for a UDP syslog destination."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None) -> ConfigFlowResult:
        """Handle syslog destination and message format configuration."""
        errors: dict[str, str] = {}

        if user_input is not None:
            host = user_input[CONF_HOST]
            port = user_input[CONF_PORT]
            dialect = user_input.get(CONF_DIALECT, DEFAULT_DIALECT)

            error = await syslog_validate(self.hass, host, port)
            if error:
                errors["base"] = error

            if not errors:
                await self.async_set_unique_id(f"{DOMAIN}_{host}_{port}")
                self._abort_if_unique_id_configured()
                _LOGGER.debug("syslog_transport: creating entry for %s:%s (%s)", host, port, dialect)
                return self.async_create_entry(
                    title=f"Syslog @ {host}:{port} ({dialect})",
                    data=user_input,
                )

        return self.async_show_form(
            step_id="user",
            data_schema=self.add_suggested_values_to_schema(SYSLOG_DATA_SCHEMA, user_input or {}),
            errors=errors,
        )

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homeassistant.const import CONF_HOST, CONF_PORT

from custom_components.syslog_transport.const import (
    CONF_APP_ID,
    CONF_APP_NAME,
    CONF_DIALECT,
    CONF_FACILITY,
    CONF_LEVEL,
    CONF_LOCAL_HOSTNAME,
    CONF_PID,
    CONF_VENDOR_HEADER,
)
from custom_components.syslog_transport.helpers import process_name

from .const import (
    DEFAULT_DIALECT,
    DEFAULT_FACILITY,
    DEFAULT_HOST,
    DEFAULT_LEVEL,
    DEFAULT_LOCAL_HOSTNAME,
    DEFAULT_SYSLOG_PORT,
    DIALECTS,
    SEVERITY_RANKS,
    SYSLOG_FACILITY_MAP,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_SYSLOG_PORT
    local_hostname: str = DEFAULT_LOCAL_HOSTNAME
    dialect: str = DEFAULT_DIALECT
    facility: str = DEFAULT_FACILITY
    pid: int = 0
    app_name: str = ""
    app_id: str | None = None
    vendor_header: str | None = None
    level: str = DEFAULT_LEVEL

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None) -> TransportConfig:
        """Build a config from loosely typed options, defaulting anything missing or invalid."""
        options = options or {}
        return cls(
            host=_text(options.get(CONF_HOST)) or DEFAULT_HOST,
            port=_integer(options.get(CONF_PORT), DEFAULT_SYSLOG_PORT, 1, 65535),
            local_hostname=_text(options.get(CONF_LOCAL_HOSTNAME)) or DEFAULT_LOCAL_HOSTNAME,
            dialect=_choice(options.get(CONF_DIALECT), DIALECTS, DEFAULT_DIALECT),
            facility=_choice(options.get(CONF_FACILITY), SYSLOG_FACILITY_MAP, DEFAULT_FACILITY),
            pid=_integer(options.get(CONF_PID), os.getpid(), 0, None),
            app_name=_text(options.get(CONF_APP_NAME)) or process_name(),
            app_id=_text(options.get(CONF_APP_ID)),
            vendor_header=_text(options.get(CONF_VENDOR_HEADER)),
            level=_choice(options.get(CONF_LEVEL), SEVERITY_RANKS, DEFAULT_LEVEL),
        )

    @property
    def facility_code(self) -> int:
        return SYSLOG_FACILITY_MAP[self.facility]


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _integer(value: Any, default: int, minimum: int, maximum: int | None) -> int:
    if isinstance(value, bool):
        value = None
    try:
        number = int(value)
    except (TypeError, ValueError):
        if value is not None:
            _LOGGER.debug("syslog_transport: ignoring invalid number %r, using %s", value, default)
        return default
    if number < minimum or (maximum is not None and number > maximum):
        _LOGGER.debug("syslog_transport: %s out of range, using %s", number, default)
        return default
    return number


def _choice(value: Any, allowed: Mapping[str, Any] | list[str], default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str) and value in allowed:
        return value
    _LOGGER.debug("syslog_transport: unknown option %r, using %s", value, default)
    return default

"""The syslog_transport integration: ship HA system_log_event to a syslog collector over UDP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .const import DOMAIN, EVENT_SYSTEM_LOG, PLATFORMS
from .forwarder import SyslogForwarder
from .syslog.config import TransportConfig
from .syslog.transport import SyslogTransport

REF_CANCEL_LISTENER = "cancel_listener"
REF_FORWARDER = "forwarder"
REF_TRANSPORT = "transport"

if TYPE_CHECKING:
    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up a syslog transport from a config entry."""
    transport = SyslogTransport(TransportConfig.from_mapping(entry.data))
    forwarder = SyslogForwarder(transport, entry.title)

    cancel_listener = hass.bus.async_listen(EVENT_SYSTEM_LOG, forwarder.handle_event)

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = {
        REF_CANCEL_LISTENER: cancel_listener,
        REF_FORWARDER: forwarder,
        REF_TRANSPORT: transport,
    }
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    _LOGGER.info(
        "syslog_transport: listening for system_log_event at %s and above, sending to %s",
        transport.level,
        transport.endpoint_desc,
    )
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload syslog_transport config entry."""
    await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    data = hass.data[DOMAIN].pop(entry.entry_id, None)
    if data is None:
        return True

    if data.get(REF_CANCEL_LISTENER):
        data[REF_CANCEL_LISTENER]()
        del data[REF_CANCEL_LISTENER]

    if data.get(REF_TRANSPORT):
        data[REF_TRANSPORT].close()
        del data[REF_TRANSPORT]

    _LOGGER.info("syslog_transport: unloaded, closed UDP socket")
    return True

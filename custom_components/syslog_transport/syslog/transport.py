from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from homeassistant.helpers.json import json_dumps
from homeassistant.util import dt as dt_util

from .config import TransportConfig
from .const import FALLBACK_LEVEL, LEVEL_ALIASES, SEVERITY_RANKS
from .formatter import MessageFormatter
from .sender import DatagramSender

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Mapping

    from .sender import CompletionCallback

_LOGGER = logging.getLogger(__name__)


def normalize_level(level: str) -> str:
    """Map any level name onto one of the eight syslog severities."""
    if level in SEVERITY_RANKS:
        return level
    return LEVEL_ALIASES.get(level, FALLBACK_LEVEL)


class SyslogTransport:
    """Formats log calls as syslog messages and sends each as one UDP datagram."""

    name = "syslog"

    def __init__(self, config: TransportConfig | None = None) -> None:
        self.config: TransportConfig = config or TransportConfig.from_mapping()
        self.producer = MessageFormatter(
            dialect=self.config.dialect,
            app_name=self.config.app_name,
            pid=self.config.pid,
            facility=self.config.facility,
        )
        self._sender = DatagramSender()
        self.endpoint_desc = f"syslog://{self.config.host}:{self.config.port} (UDP {self.config.dialect})"

    @property
    def level(self) -> str:
        """Active level; filtering on it is left to the caller."""
        return self.config.level

    @property
    def sender(self) -> DatagramSender:
        return self._sender

    def emit(
        self,
        level: str,
        message: str,
        metadata: Mapping[str, Any] | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> asyncio.Task[bool]:
        """Send one log call without blocking on the network.

        Must be called from the event loop thread. Formatting and socket errors
        arrive through ``on_complete`` and the returned task; only calling with
        no running loop raises (RuntimeError), and then nothing is sent.
        """
        severity = normalize_level(level)
        try:
            envelope = self.producer.produce(
                severity=severity,
                host=self.config.local_hostname,
                timestamp=dt_util.now(),
                message=self._payload(message, metadata),
                app_id=self.config.app_id,
                pid=self.config.pid,
            )
        except (TypeError, ValueError) as err:
            _LOGGER.debug("syslog_transport: cannot serialize %s message: %s", severity, err)
            return self._sender.fail(err, on_complete)
        return self._sender.send(envelope, self.config.host, self.config.port, on_complete)

    def _payload(self, message: str, metadata: Mapping[str, Any] | None) -> str:
        data: dict[str, Any] = dict(metadata) if metadata else {}
        data["message"] = message
        raw = json_dumps(data)
        if self.config.vendor_header:
            return f"{self.config.vendor_header} {raw}"
        return raw

    def close(self) -> None:
        self._sender.close()

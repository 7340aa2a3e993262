"""Shared fixtures for syslog_transport tests."""

from __future__ import annotations

import asyncio
import datetime as dt
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock, patch

import pytest
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import Event
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from custom_components.syslog_transport.syslog.config import TransportConfig

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

FIXED_NOW = dt.datetime(2023, 11, 14, 22, 13, 20, tzinfo=dt.UTC)


class DatagramCollector(asyncio.DatagramProtocol):
    """Loopback syslog collector capturing every datagram it receives."""

    def __init__(self) -> None:
        self.received: asyncio.Queue[bytes] = asyncio.Queue()
        self.port: int = 0

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        self.port = transport.get_extra_info("sockname")[1]

    def datagram_received(self, data: bytes, addr: tuple[str, int]) -> None:  # noqa: ARG002
        self.received.put_nowait(data)

    async def next_message(self, timeout: float = 2) -> bytes:
        return await asyncio.wait_for(self.received.get(), timeout)


@pytest.fixture
async def collector(socket_enabled: None) -> AsyncGenerator[DatagramCollector]:  # noqa: ARG001
    loop = asyncio.get_running_loop()
    transport, protocol = await loop.create_datagram_endpoint(DatagramCollector, local_addr=("127.0.0.1", 0))
    yield protocol
    transport.close()


@pytest.fixture
def transport_config() -> TransportConfig:
    return TransportConfig(
        host="127.0.0.1",
        port=5514,
        local_hostname="myhost",
        app_name="app",
        pid=1234,
    )


@pytest.fixture
def mock_sender() -> Generator[MagicMock]:
    """Replace the datagram sender the transport builds, so no socket is opened."""
    with patch("custom_components.syslog_transport.syslog.transport.DatagramSender") as sender_cls:
        yield sender_cls.return_value


@pytest.fixture
def fixed_now() -> Generator[dt.datetime]:
    with patch("custom_components.syslog_transport.syslog.transport.dt_util.now", return_value=FIXED_NOW):
        yield FIXED_NOW


@pytest.fixture
def mock_entities_callback() -> AddConfigEntryEntitiesCallback:
    return MagicMock(spec=AddConfigEntryEntitiesCallback)


@pytest.fixture
def mock_entry_syslog() -> ConfigEntry:
    """Create a mock ConfigEntry for a syslog destination."""
    entry = MagicMock(spec=ConfigEntry)
    entry.entry_id = "test_syslog_entry"
    entry.domain = "syslog_transport"
    entry.title = "Syslog @ 127.0.0.1:5514 (BSD)"
    entry.data = {
        "host": "127.0.0.1",
        "port": 5514,
        "local_hostname": "ha-host",
        "dialect": "BSD",
        "facility": "local0",
        "app_name": "homeassistant",
        "level": "warning",
    }
    return entry


@pytest.fixture
def sample_event_data() -> dict[str, Any]:
    """Create a sample system_log_event data dict."""
    return {
        "name": "homeassistant.components.sensor",
        "message": ["Something went wrong"],
        "level": "ERROR",
        "source": ("homeassistant/components/sensor/__init__.py", 42),
        "timestamp": 1700000000.0,
        "exception": "Traceback (most recent call last):\n  File ...\nValueError: bad value",
        "count": 3,
        "first_occurred": 1699999000.0,
    }


@pytest.fixture
def minimal_event_data() -> dict[str, Any]:
    """Create a minimal system_log_event data dict."""
    return {
        "message": ["Simple warning message"],
        "level": "WARNING",
        "timestamp": 1700000000.0,
    }


@pytest.fixture
def mock_event(sample_event_data: dict[str, Any]) -> Event:
    """Create a mock HA Event with sample data."""
    event = MagicMock(spec=Event)
    event.data = sample_event_data
    return event


@pytest.fixture
def mock_event_minimal(minimal_event_data: dict[str, Any]) -> Event:
    """Create a mock HA Event with minimal data."""
    event = MagicMock(spec=Event)
    event.data = minimal_event_data
    return event

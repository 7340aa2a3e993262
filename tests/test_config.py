"""Unit tests for transport configuration defaults."""

from __future__ import annotations

import dataclasses
import os
from unittest.mock import patch

import pytest

from custom_components.syslog_transport.syslog.config import TransportConfig


class TestDefaults:
    @patch("custom_components.syslog_transport.syslog.config.process_name", return_value="pytest")
    def test_empty_options(self, _process_name: object) -> None:
        config = TransportConfig.from_mapping({})
        assert config.host == "localhost"
        assert config.port == 514
        assert config.local_hostname == "localhost"
        assert config.dialect == "BSD"
        assert config.facility == "local0"
        assert config.pid == os.getpid()
        assert config.app_name == "pytest"
        assert config.app_id is None
        assert config.vendor_header is None
        assert config.level == "error"

    def test_none_options(self) -> None:
        assert TransportConfig.from_mapping(None).port == 514

    def test_full_options(self) -> None:
        config = TransportConfig.from_mapping({
            "host": "syslog.example.com",
            "port": 10514,
            "local_hostname": "ha",
            "dialect": "IETF",
            "facility": "daemon",
            "pid": 42,
            "app_name": "homeassistant",
            "app_id": "core",
            "vendor_header": "H1",
            "level": "debug",
        })
        assert config == TransportConfig(
            host="syslog.example.com",
            port=10514,
            local_hostname="ha",
            dialect="IETF",
            facility="daemon",
            pid=42,
            app_name="homeassistant",
            app_id="core",
            vendor_header="H1",
            level="debug",
        )
        assert config.facility_code == 3

    def test_immutable(self) -> None:
        config = TransportConfig.from_mapping({})
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.host = "elsewhere"  # type: ignore[misc]


class TestInvalidOptionsDefaulted:
    @pytest.mark.parametrize("port", [0, -1, 70000, "abc", None, True])
    def test_port(self, port: object) -> None:
        assert TransportConfig.from_mapping({"port": port}).port == 514

    def test_port_numeric_string(self) -> None:
        assert TransportConfig.from_mapping({"port": "1514"}).port == 1514

    def test_unknown_facility(self) -> None:
        assert TransportConfig.from_mapping({"facility": "local9"}).facility == "local0"

    def test_unknown_dialect(self) -> None:
        assert TransportConfig.from_mapping({"dialect": "rfc9999"}).dialect == "BSD"

    def test_unknown_level(self) -> None:
        assert TransportConfig.from_mapping({"level": "verbose"}).level == "error"

    def test_invalid_pid(self) -> None:
        assert TransportConfig.from_mapping({"pid": "me"}).pid == os.getpid()

    def test_empty_strings(self) -> None:
        config = TransportConfig.from_mapping({"host": "", "app_id": "", "vendor_header": ""})
        assert config.host == "localhost"
        assert config.app_id is None
        assert config.vendor_header is None

"""Diagnostic sensors describing what a syslog destination has been sent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homeassistant.components.sensor import SensorEntity, SensorEntityDescription, SensorStateClass
from homeassistant.const import EntityCategory
from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo

from . import REF_FORWARDER
from .const import DOMAIN
from .syslog.const import SEVERITY_RANKS

if TYPE_CHECKING:
    from collections.abc import Callable

    from homeassistant.config_entries import ConfigEntry
    from homeassistant.core import HomeAssistant
    from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

    from .forwarder import SyslogForwarder


def sent_attributes(forwarder: SyslogForwarder) -> dict[str, Any]:
    # most severe first, every severity present so history graphs line up
    attrs: dict[str, Any] = {
        severity: forwarder.sent_by_severity[severity]
        for severity in sorted(SEVERITY_RANKS, key=SEVERITY_RANKS.__getitem__, reverse=True)
    }
    attrs["last_sent_time"] = forwarder.last_sent
    return attrs


def socket_error_attributes(forwarder: SyslogForwarder) -> dict[str, Any]:
    sender = forwarder.transport.sender
    return {"last_error_time": sender.last_socket_error_time, "last_error_message": sender.last_socket_error}


@dataclass(frozen=True, kw_only=True)
class SyslogSensorEntityDescription(SensorEntityDescription):
    """Describes a syslog destination sensor."""

    value_fn: Callable[[SyslogForwarder], int]
    attr_fn: Callable[[SyslogForwarder], dict[str, Any]] = lambda _: {}


SENSORS: tuple[SyslogSensorEntityDescription, ...] = (
    SyslogSensorEntityDescription(
        key="sent",
        translation_key="sent",
        native_unit_of_measurement="message",
        state_class=SensorStateClass.TOTAL_INCREASING,
        value_fn=lambda forwarder: forwarder.sent_count,
        attr_fn=sent_attributes,
    ),
    SyslogSensorEntityDescription(
        key="filtered",
        translation_key="filtered",
        native_unit_of_measurement="event",
        state_class=SensorStateClass.TOTAL_INCREASING,
        value_fn=lambda forwarder: forwarder.filtered_count,
        attr_fn=lambda forwarder: {"active_level": forwarder.transport.level, "events": forwarder.event_count},
    ),
    SyslogSensorEntityDescription(
        key="send_errors",
        translation_key="send_errors",
        native_unit_of_measurement="error",
        state_class=SensorStateClass.TOTAL_INCREASING,
        value_fn=lambda forwarder: forwarder.error_count,
        attr_fn=lambda forwarder: {
            "format_errors": forwarder.format_error_count,
            "udp_errors": forwarder.send_error_count,
            "last_error_time": forwarder.last_error,
            "last_error_message": forwarder.last_error_message,
        },
    ),
    SyslogSensorEntityDescription(
        key="socket_errors",
        translation_key="socket_errors",
        native_unit_of_measurement="error",
        state_class=SensorStateClass.TOTAL_INCREASING,
        value_fn=lambda forwarder: forwarder.transport.sender.socket_error_count,
        attr_fn=socket_error_attributes,
    ),
)


class SyslogSensor(SensorEntity):
    """Counter kept for one syslog destination."""

    _attr_entity_category = EntityCategory.DIAGNOSTIC
    _attr_should_poll = True
    _attr_has_entity_name = True

    def __init__(
        self,
        forwarder: SyslogForwarder,
        description: SyslogSensorEntityDescription,
        entry_id: str,
        device_info: DeviceInfo,
    ) -> None:
        super().__init__()
        self._forwarder: SyslogForwarder = forwarder
        self.entity_description: SyslogSensorEntityDescription = description  # pyright: ignore[reportIncompatibleVariableOverride]
        self._attr_unique_id = f"{entry_id}_{description.key}"
        self._attr_device_info = device_info
        self._attr_translation_key = description.translation_key

    @property
    def native_value(self) -> int:  # pyright: ignore[reportIncompatibleVariableOverride]
        return self.entity_description.value_fn(self._forwarder)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:  # pyright: ignore[reportIncompatibleVariableOverride]
        return self.entity_description.attr_fn(self._forwarder)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the sensors of one syslog destination."""
    forwarder: SyslogForwarder = hass.data[DOMAIN][entry.entry_id][REF_FORWARDER]
    config = forwarder.transport.config
    device_info = DeviceInfo(
        entry_type=DeviceEntryType.SERVICE,
        identifiers={(DOMAIN, entry.entry_id)},
        name=entry.title,
        manufacturer="syslog",
        model=f"{config.dialect} over UDP",
    )
    async_add_entities(SyslogSensor(forwarder, description, entry.entry_id, device_info) for description in SENSORS)

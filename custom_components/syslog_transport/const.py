"""Constants for the syslog_transport integration."""

from homeassistant.const import EntityPlatforms, Platform

DOMAIN = "syslog_transport"

PLATFORMS: list[EntityPlatforms] = [Platform.SENSOR]

# Config entry data keys (host and port come from homeassistant.const)
CONF_LOCAL_HOSTNAME = "local_hostname"
CONF_DIALECT = "dialect"
CONF_FACILITY = "facility"
CONF_PID = "pid"
CONF_APP_NAME = "app_name"
CONF_APP_ID = "app_id"
CONF_VENDOR_HEADER = "vendor_header"
CONF_LEVEL = "level"

# HA event type
EVENT_SYSTEM_LOG = "system_log_event"

# HA log level name -> transport level name, applied before normalization
HA_LEVEL_MAP: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "crit",
}

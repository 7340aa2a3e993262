import voluptuous as vol
from homeassistant.const import CONF_HOST, CONF_PORT

from custom_components.syslog_transport.const import (
    CONF_APP_ID,
    CONF_APP_NAME,
    CONF_DIALECT,
    CONF_FACILITY,
    CONF_LEVEL,
    CONF_LOCAL_HOSTNAME,
    CONF_VENDOR_HEADER,
)

# Severity ranks, least to most urgent
SEVERITY_RANKS: dict[str, int] = {
    "debug": 0,
    "info": 1,
    "notice": 2,
    "warning": 3,
    "error": 4,
    "crit": 5,
    "alert": 6,
    "emerg": 7,
}

# Popular non-syslog level names and what they degrade to
LEVEL_ALIASES: dict[str, str] = {
    "verbose": "info",
    "silly": "debug",
    "warn": "warning",
}

FALLBACK_LEVEL = "notice"

# Syslog facility mapping: name -> numeric code
SYSLOG_FACILITY_MAP: dict[str, int] = {
    "kern": 0,
    "user": 1,
    "mail": 2,
    "daemon": 3,
    "auth": 4,
    "syslog": 5,
    "lpr": 6,
    "news": 7,
    "uucp": 8,
    "cron": 9,
    "authpriv": 10,
    "ftp": 11,
    "ntp": 12,
    "audit": 13,
    "alert": 14,
    "clock": 15,
    "local0": 16,
    "local1": 17,
    "local2": 18,
    "local3": 19,
    "local4": 20,
    "local5": 21,
    "local6": 22,
    "local7": 23,
}

DIALECT_BSD = "BSD"  # RFC 3164
DIALECT_IETF = "IETF"  # RFC 5424
DIALECTS = [DIALECT_BSD, DIALECT_IETF]

NILVALUE = "-"

# RFC 3164 month names, fixed so the header never depends on the locale
BSD_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Syslog defaults
DEFAULT_HOST = "localhost"
DEFAULT_SYSLOG_PORT = 514
DEFAULT_LOCAL_HOSTNAME = "localhost"
DEFAULT_DIALECT = DIALECT_BSD
DEFAULT_FACILITY = "local0"
DEFAULT_LEVEL = "error"
DEFAULT_APP_NAME = "homeassistant"

SYSLOG_DATA_SCHEMA = vol.Schema({
    vol.Required(CONF_HOST): str,
    vol.Optional(CONF_PORT, default=DEFAULT_SYSLOG_PORT): vol.All(int, vol.Range(min=1, max=65535)),
    vol.Optional(CONF_LOCAL_HOSTNAME, default=DEFAULT_LOCAL_HOSTNAME): str,
    vol.Optional(CONF_DIALECT, default=DEFAULT_DIALECT): vol.In(DIALECTS),
    vol.Optional(CONF_FACILITY, default=DEFAULT_FACILITY): vol.In(list(SYSLOG_FACILITY_MAP.keys())),
    vol.Optional(CONF_APP_NAME, default=DEFAULT_APP_NAME): str,
    vol.Optional(CONF_APP_ID): str,
    vol.Optional(CONF_VENDOR_HEADER): str,
    vol.Optional(CONF_LEVEL, default=DEFAULT_LEVEL): vol.In(list(SEVERITY_RANKS.keys())),
})

import logging
from collections import Counter
from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING, Any

from homeassistant.core import Event, callback
from homeassistant.util import dt as dt_util

from .const import HA_LEVEL_MAP
from .helpers import isotimestamp
from .syslog.const import SEVERITY_RANKS
from .syslog.transport import SyslogTransport, normalize_level

if TYPE_CHECKING:
    import datetime as dt

_LOGGER = logging.getLogger(__name__)


class SyslogForwarder:
    """Routes system_log_event records at or above the active level to a syslog transport"""

    def __init__(self, transport: SyslogTransport, name: str) -> None:
        self.transport: SyslogTransport = transport
        self.name: str = name
        self.event_count: int = 0
        self.filtered_count: int = 0
        # keyed by syslog severity, e.g. {"error": 3, "warning": 10}
        self.sent_by_severity: Counter[str] = Counter()
        self.last_sent: dt.datetime | None = None
        self.format_error_count: int = 0
        self.send_error_count: int = 0
        self.last_error_message: str | None = None
        self.last_error: dt.datetime | None = None
        self.self_source: str = "custom_components/syslog_transport/"

    @property
    def sent_count(self) -> int:
        return self.sent_by_severity.total()

    @property
    def error_count(self) -> int:
        return self.format_error_count + self.send_error_count

    @callback
    def handle_event(self, event: Event) -> None:
        self.event_count += 1
        data: Mapping[str, Any] = event.data or {}
        source = data.get("source")
        if source and len(source) == 2 and self.self_source in str(source[0]):
            # prevent log loops
            return

        level = to_transport_level(data.get("level"))
        severity = normalize_level(level)
        if SEVERITY_RANKS[severity] < SEVERITY_RANKS[self.transport.level]:
            self.filtered_count += 1
            return

        messages = data.get("message") or []
        message = " ".join(str(m) for m in messages) if isinstance(messages, list) else str(messages)
        self.transport.emit(level, message, event_metadata(data), partial(self.on_complete, severity))

    @callback
    def on_complete(self, severity: str, error: BaseException | None, sent: bool | None) -> None:
        """Tally the outcome of one emit for the severity it was sent at."""
        if error is None and sent:
            self.sent_by_severity[severity] += 1
            self.last_sent = dt_util.now()
            return
        if isinstance(error, OSError):
            _LOGGER.warning("syslog_transport: failed to send %s message via UDP: %s", severity, error)
            self.send_error_count += 1
        else:
            _LOGGER.error("syslog_transport: unable to format %s log record: %s", severity, error)
            self.format_error_count += 1
        self.last_error_message = str(error)
        self.last_error = dt_util.now()


def to_transport_level(level: Any) -> str:
    """Translate a Home Assistant log level name into the transport's vocabulary."""
    if not isinstance(level, str):
        return ""
    return HA_LEVEL_MAP.get(level.upper(), level.lower())


def event_metadata(data: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the system_log_event fields worth shipping next to the message."""
    # name: str, source: (str, int), timestamp: float, exception: str, count: int, first_occurred: float
    meta: dict[str, Any] = {}
    if data.get("name"):
        meta["logger"] = data["name"]
    source = data.get("source")
    if source and isinstance(source, (tuple, list)) and len(source) == 2:
        meta["source"] = f"{source[0]}:{source[1]}"
    if data.get("exception"):
        meta["exception"] = data["exception"]
    if data.get("count"):
        meta["count"] = data["count"]
    for key in ("timestamp", "first_occurred"):
        value = data.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            meta[key] = isotimestamp(dt_util.utc_from_timestamp(value))
    return meta

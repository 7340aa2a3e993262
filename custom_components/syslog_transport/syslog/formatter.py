from __future__ import annotations

from typing import TYPE_CHECKING

from custom_components.syslog_transport.helpers import bsdtimestamp, isotimestamp

from .const import DIALECT_IETF, NILVALUE, SEVERITY_RANKS, SYSLOG_FACILITY_MAP

if TYPE_CHECKING:
    import datetime as dt


class MessageFormatter:
    """Renders syslog envelopes in the RFC 3164 (BSD) or RFC 5424 (IETF) grammar."""

    def __init__(self, dialect: str, app_name: str, pid: int, facility: str) -> None:
        self.dialect = dialect
        self.app_name = app_name
        self.pid = pid
        self.facility = facility
        self._facility_code = SYSLOG_FACILITY_MAP[facility]

    def priority(self, severity: str) -> int:
        return self._facility_code * 8 + SEVERITY_RANKS[severity]

    def produce(
        self,
        severity: str,
        host: str,
        timestamp: dt.datetime,
        message: str,
        app_id: str | None = None,
        pid: int | None = None,
    ) -> bytes:
        """Build a complete syslog message; the body is passed through untouched."""
        pri = self.priority(severity)
        procid = self.pid if pid is None else pid

        if self.dialect == DIALECT_IETF:
            # <PRI>VERSION SP TIMESTAMP SP HOSTNAME SP APP-NAME SP PROCID SP MSGID SP SD SP MSG
            line = (
                f"<{pri}>1 {isotimestamp(timestamp)} {host or NILVALUE} {self.app_name or NILVALUE}"
                f" {procid} {app_id or NILVALUE} {NILVALUE} {message}"
            )
        else:
            line = f"<{pri}>{bsdtimestamp(timestamp)} {host} {self.app_name}[{procid}]: {message}"

        return line.encode("utf-8", errors="replace")

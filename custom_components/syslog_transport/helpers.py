import datetime as dt
import os
import sys

from .syslog.const import BSD_MONTHS


def isotimestamp(when: dt.datetime) -> str:
    """RFC 5424 timestamp, millisecond precision with the zone offset."""
    if when.utcoffset() == dt.timedelta(0):
        return f"{when.isoformat(timespec='milliseconds')[:23]}Z"
    return when.isoformat(timespec="milliseconds")


def bsdtimestamp(when: dt.datetime) -> str:
    """RFC 3164 timestamp: ``Mmm dd hh:mm:ss``, no year and no zone."""
    return f"{BSD_MONTHS[when.month - 1]} {when.day:2d} {when:%H:%M:%S}"


def process_name() -> str:
    """Name of the running program, as syslog tags usually show it."""
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "python"

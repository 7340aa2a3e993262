from __future__ import annotations

import asyncio
import ipaddress
import logging
import socket
from typing import TYPE_CHECKING, Any

from homeassistant.util import dt as dt_util

if TYPE_CHECKING:
    import datetime as dt
    from collections.abc import Callable, Coroutine

    CompletionCallback = Callable[[BaseException | None, bool | None], None]

_LOGGER = logging.getLogger(__name__)

RECV_BUFFER_SIZE = 65536


class DatagramSender:
    """Sole owner of one unbound UDP socket, shared by every send."""

    def __init__(self) -> None:
        self._sock: socket.socket | None = None
        self._socket_error: OSError | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._pending: set[asyncio.Task[bool]] = set()
        self.socket_error_count = 0
        self.last_socket_error: str | None = None
        self.last_socket_error_time: dt.datetime | None = None
        try:
            self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            self._sock.setblocking(False)
        except OSError as err:
            _LOGGER.warning("syslog_transport: failed to create UDP socket: %s", err)
            self._socket_error = err
            self._sock = None

    def send(
        self, data: bytes, host: str, port: int, on_complete: CompletionCallback | None = None
    ) -> asyncio.Task[bool]:
        """Write one datagram to host:port without waiting for the network.

        The returned task resolves to True once the socket layer accepted the
        datagram and to False on a local error; ``on_complete`` is called once
        with the same outcome. Must be called from the event loop thread: with
        no running loop this raises RuntimeError and nothing is sent.
        """
        loop = asyncio.get_running_loop()
        return self._track(loop, self._send(data, host, port, on_complete))

    def fail(self, error: BaseException, on_complete: CompletionCallback | None = None) -> asyncio.Task[bool]:
        """Report an error detected before sending through the usual completion path."""
        loop = asyncio.get_running_loop()
        return self._track(loop, self._report(error, on_complete))

    def _track(self, loop: asyncio.AbstractEventLoop, coro: Coroutine[Any, Any, bool]) -> asyncio.Task[bool]:
        self._watch_errors(loop)
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _send(self, data: bytes, host: str, port: int, on_complete: CompletionCallback | None) -> bool:
        sock = self._sock
        try:
            if sock is None:
                raise self._socket_error or OSError("UDP socket is closed")
            address = await self._resolve(host, port)
            # close() may have run while the name was being resolved
            if self._sock is not sock:
                raise OSError("UDP socket is closed")
            await asyncio.get_running_loop().sock_sendto(sock, data, address)
        except (OSError, ValueError) as err:
            _LOGGER.debug("syslog_transport: UDP send to %s:%s failed: %s", host, port, err)
            _complete(on_complete, err, None)
            return False
        _complete(on_complete, None, True)
        return True

    async def _report(self, error: BaseException, on_complete: CompletionCallback | None) -> bool:
        _complete(on_complete, error, None)
        return False

    async def _resolve(self, host: str, port: int) -> tuple[str, int]:
        try:
            return str(ipaddress.IPv4Address(host)), port
        except ValueError:
            pass
        infos = await asyncio.get_running_loop().getaddrinfo(host, port, family=socket.AF_INET, type=socket.SOCK_DGRAM)
        if not infos:
            raise OSError(f"no IPv4 address for {host}")
        return infos[0][4][:2]

    def _watch_errors(self, loop: asyncio.AbstractEventLoop) -> None:
        """Drain the socket's background error channel on the event loop."""
        if self._loop is not None or self._sock is None:
            return
        self._loop = loop
        loop.add_reader(self._sock.fileno(), self._read_ready)

    def _read_ready(self) -> None:
        if self._sock is None:
            return
        try:
            data, addr = self._sock.recvfrom(RECV_BUFFER_SIZE)
        except (BlockingIOError, InterruptedError):
            return
        except OSError as err:
            # e.g. ICMP port unreachable, not attributable to a single send
            _LOGGER.warning("syslog_transport: UDP socket error: %s", err)
            self.socket_error_count += 1
            self.last_socket_error = str(err)
            self.last_socket_error_time = dt_util.now()
            return
        _LOGGER.debug("syslog_transport: discarding %s unexpected bytes from %s", len(data), addr)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def close(self) -> None:
        """Stop watching and release the socket."""
        if self._sock is None:
            return
        if self._loop is not None and not self._loop.is_closed():
            self._loop.remove_reader(self._sock.fileno())
        self._loop = None
        self._sock.close()
        self._sock = None


def _complete(on_complete: CompletionCallback | None, error: BaseException | None, success: bool | None) -> None:
    if on_complete is None:
        return
    try:
        on_complete(error, success)
    except Exception:
        _LOGGER.exception("syslog_transport: completion callback failed")


async def validate(hass: Any, host: str, port: int) -> str | None:
    """Check a syslog destination resolves to an IPv4 address. Returns error key or None."""
    try:
        await hass.loop.getaddrinfo(host, port, family=socket.AF_INET, type=socket.SOCK_DGRAM)
    except OSError as err:
        _LOGGER.error("Syslog destination lookup failed: %s", err)
        return "cannot_connect"
    except Exception as err:
        _LOGGER.error("Syslog destination unknown error: %s", err)
        return "unknown"
    return None

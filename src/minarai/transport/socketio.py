"""
Socket.IO transport: the default ``io`` factory for MinaraiClient.

``connect(url, options)`` returns a handle immediately and schedules the
connection on the running event loop, so handlers registered right after
construction are in place before the first ``connect`` event fires.
Reconnection and backoff are left to python-socketio.
"""

import asyncio
from typing import Any, Callable, Optional

import socketio
from socketio.exceptions import ConnectionError as SocketIOConnectionError

from minarai.errors import ConnectionError
from minarai.logger import get_logger

logger = get_logger("transport.socketio")

# Options that belong to AsyncClient.connect(); the rest go to AsyncClient().
CONNECT_OPTIONS = {"headers", "auth", "transports", "namespaces", "socketio_path", "wait", "wait_timeout", "retry"}


def split_options(options: Optional[dict[str, Any]]) -> tuple[dict[str, Any], dict[str, Any]]:
    client_kwargs: dict[str, Any] = {}
    connect_kwargs: dict[str, Any] = {}
    for key, value in (options or {}).items():
        (connect_kwargs if key in CONNECT_OPTIONS else client_kwargs)[key] = value
    return client_kwargs, connect_kwargs


class SocketIOTransport:
    def __init__(self, url: str, options: Optional[dict[str, Any]] = None):
        client_kwargs, connect_kwargs = split_options(options)
        self._url = url
        self._connect_kwargs = connect_kwargs
        self._sio = socketio.AsyncClient(**client_kwargs)
        self._connect_task: Optional[asyncio.Task] = None

    @property
    def connected(self) -> bool:
        return self._sio.connected

    def open(self) -> None:
        """Schedule the connection on the running loop."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            raise ConnectionError("SocketIOTransport must be opened inside a running event loop")
        self._connect_task = loop.create_task(self._connect())

    async def _connect(self) -> None:
        try:
            await self._sio.connect(self._url, **self._connect_kwargs)
        except SocketIOConnectionError as e:
            logger.error(f"Connect to {self._url} failed: {e}")
        except Exception as e:
            logger.error(f"Connect to {self._url} failed: {e!r}")

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self._sio.on(event, handler)

    def emit(self, event: str, data: Any = None) -> None:
        """Schedule an emit. Fire-and-forget: failures are logged."""

        async def _do_emit() -> None:
            try:
                await self._sio.emit(event, data)
            except Exception as e:
                logger.error(f"Emit failed for {event}: {e}")

        asyncio.get_running_loop().create_task(_do_emit())

    async def disconnect(self) -> None:
        if self._connect_task and not self._connect_task.done():
            self._connect_task.cancel()
        await self._sio.disconnect()


def connect(url: str, options: Optional[dict[str, Any]] = None) -> SocketIOTransport:
    transport = SocketIOTransport(url, options)
    transport.open()
    return transport

from typing import Any, Callable

import pytest

from minarai.client import MinaraiClient


class FakeSocket:
    """Recording stand-in for a realtime transport handle."""

    def __init__(self, url: str, options: Any):
        self.url = url
        self.options = options
        self.handlers: dict[str, list[Callable[..., Any]]] = {}
        self.emitted: list[tuple[str, tuple]] = []
        self.closed = False

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, *args: Any) -> None:
        self.emitted.append((event, args))

    def trigger(self, event: str, *args: Any) -> None:
        for handler in list(self.handlers.get(event, [])):
            handler(*args)

    def emitted_named(self, event: str) -> list[tuple]:
        return [args for name, args in self.emitted if name == event]

    async def disconnect(self) -> None:
        self.closed = True


@pytest.fixture
def sockets() -> list[FakeSocket]:
    return []


@pytest.fixture
def io(sockets):
    def factory(url, options=None):
        socket = FakeSocket(url, options)
        sockets.append(socket)
        return socket
    return factory


@pytest.fixture
def make_client(io, sockets):
    def _make(**kwargs: Any) -> tuple[MinaraiClient, FakeSocket]:
        kwargs.setdefault("silent", True)
        url = kwargs.pop("socketio_root_url", "https://socket.example.com")
        application_id = kwargs.pop("application_id", "A")
        client = MinaraiClient(io, url, application_id, **kwargs)
        return client, sockets[-1]
    return _make

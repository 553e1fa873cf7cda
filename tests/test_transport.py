"""Socket.IO transport adapter."""

import pytest

from minarai.errors import ConnectionError
from minarai.transport.socketio import SocketIOTransport, connect, split_options


def test_split_options():
    client_kwargs, connect_kwargs = split_options({
        "transports": ["websocket"],
        "socketio_path": "/socket.io",
        "reconnection_attempts": 3,
    })
    assert client_kwargs == {"reconnection_attempts": 3}
    assert connect_kwargs == {"transports": ["websocket"], "socketio_path": "/socket.io"}
    assert split_options(None) == ({}, {})


def test_open_requires_running_loop():
    with pytest.raises(ConnectionError):
        connect("http://localhost:1")


@pytest.mark.asyncio
async def test_handlers_are_registered_on_the_socketio_client():
    transport = SocketIOTransport("http://localhost:1")

    def handler(data=None):
        pass

    transport.on("joined", handler)
    assert transport._sio.handlers["/"]["joined"] is handler
    assert transport.connected is False


@pytest.mark.asyncio
async def test_unexpected_connect_failure_is_logged(caplog, monkeypatch):
    transport = SocketIOTransport("not a url")

    async def fail(*args, **kwargs):
        raise ValueError("bad url")

    monkeypatch.setattr(transport._sio, "connect", fail)
    with caplog.at_level("ERROR", logger="minarai"):
        await transport._connect()
    assert any("bad url" in r.getMessage() for r in caplog.records)

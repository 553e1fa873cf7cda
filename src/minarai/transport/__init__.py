"""
Transport boundary: the realtime connection and the upload HTTP client.
"""

from typing import Any, Callable, Protocol


class TransportHandle(Protocol):
    """What the client needs from a realtime connection.

    ``minarai.transport.socketio.connect`` returns one; tests pass fakes.
    """

    def on(self, event: str, handler: Callable[..., Any]) -> Any: ...

    def emit(self, event: str, data: Any = None) -> Any: ...


TransportFactory = Callable[[str, Any], TransportHandle]

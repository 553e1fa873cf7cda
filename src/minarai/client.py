"""
MinaraiClient — realtime session client for the Minarai chat service.

Owns one transport connection and the client identity, builds outbound
envelopes and republishes inbound transport events on a local event stream.
"""

import json
import os
import time
from pathlib import Path
from typing import Any, BinaryIO, Callable, Optional, Union

from pydantic import ValidationError

from minarai import logger as log
from minarai.errors import InvalidArgumentError, UploadNotConfiguredError
from minarai.events import EventStream, Handler
from minarai.models import upload
from minarai.models.envelope import (
    CommandBody,
    LogsBody,
    MessageBody,
    OperationKind,
    SystemCommand,
    SystemCommandBody,
)
from minarai.models.events import C2SEvent, INBOUND_EVENTS, InboundEvent, S2CEvent, republish
from minarai.models.identity import Identity
from minarai.transport import TransportFactory, TransportHandle
from minarai.transport.envelope import build_envelope
from minarai.transport.http import UploadClient

logger = log.get_logger("client")

DEFAULT_LANG = "ja"
DEFAULT_SEND_LANG = "ja-JP"

FileInput = Union[str, Path, BinaryIO]


def default_device_id(application_id: str) -> str:
    return f"devise_id_{application_id}_{int(time.time() * 1000)}"


class MinaraiClient:
    """Async Minarai session client.

    Must be constructed inside a running event loop when the default
    Socket.IO transport is used: the connection opens eagerly.
    """

    def __init__(
        self,
        io: Optional[TransportFactory],
        socketio_root_url: Optional[str],
        application_id: Optional[str],
        *,
        socketio_options: Optional[dict[str, Any]] = None,
        image_url: Optional[str] = None,
        client_id: Optional[str] = None,
        user_id: Optional[str] = None,
        device_id: Optional[str] = None,
        lang: Optional[str] = None,
        debug: bool = False,
        silent: bool = False,
        upload_client: Optional[UploadClient] = None,
    ):
        if not io or not socketio_root_url or not application_id:
            raise InvalidArgumentError("opts must contain io, socketio_root_url, and application_id")

        log.configure(debug=debug, silent=silent)

        self._events = EventStream()
        self._identity = Identity(
            application_id=application_id,
            client_id=client_id,
            user_id=user_id,
            device_id=device_id or default_device_id(application_id),
        )
        self.lang = lang or DEFAULT_LANG
        self.image_url = upload.upload_endpoint(image_url) if image_url else None
        self._upload_client = upload_client
        self._socket: TransportHandle = io(socketio_root_url, socketio_options)

    @property
    def identity(self) -> Identity:
        return self._identity.model_copy()

    @property
    def events(self) -> EventStream:
        return self._events

    def on(self, event: str, handler: Handler) -> Callable[[], None]:
        return self._events.on(event, handler)

    def once(self, event: str, handler: Handler) -> Callable[[], None]:
        return self._events.once(event, handler)

    def off(self, event: str, handler: Handler) -> None:
        self._events.off(event, handler)

    async def wait_for(self, event: str, timeout: Optional[float] = 10.0) -> Any:
        return await self._events.wait_for(event, timeout=timeout)

    # -- inbound ----------------------------------------------------------

    def initialize(self) -> None:
        """Register transport handlers. Call once; a second call registers twice."""
        for name in INBOUND_EVENTS:
            self._socket.on(name, self._make_handler(name))

    def _make_handler(self, name: str) -> Callable[..., None]:
        def handler(*args: Any) -> None:
            self._handle(InboundEvent(name, args[0] if args else None))
        return handler

    def _handle(self, event: InboundEvent) -> None:
        if event.name == S2CEvent.JOINED:
            try:
                self._identity.reconcile(event.payload)
            except ValidationError as e:
                logger.warning(f"Ignoring malformed joined payload {event.payload!r}: {e}")
                return

        log.log_obj(logger, event.name, event.payload)
        local = republish(event)
        self._events.emit(local.name, *local.args)

        if event.name == S2CEvent.CONNECT:
            self._socket.emit(C2SEvent.JOIN_AS_CLIENT, self._identity.to_wire())

    # -- outbound ---------------------------------------------------------

    def _emit_envelope(self, kind: OperationKind, body: Any, label: str, lang: Optional[str] = None) -> dict[str, Any]:
        payload = build_envelope(kind, self._identity, body, lang=lang).to_wire()
        log.log_obj(logger, label, payload)
        self._socket.emit(kind.value, payload)
        return payload

    def send(
        self,
        text: Any,
        *,
        lang: Optional[str] = None,
        position: Any = None,
        extra: Any = None,
    ) -> dict[str, Any]:
        """Send an utterance. Fire-and-forget; returns the emitted envelope."""
        body = MessageBody(
            message=text,
            position=position if position is not None else {},
            extra=extra if extra is not None else {},
        )
        return self._emit_envelope(OperationKind.MESSAGE, body, "send", lang=lang or DEFAULT_SEND_LANG)

    def send_command(self, name: str, extra: Any = None) -> dict[str, Any]:
        return self._emit_envelope(OperationKind.COMMAND, CommandBody(name=name, extra=extra), "send-command")

    def send_system_command(self, command: Any, payload: Any = None) -> dict[str, Any]:
        """Deprecated: use :meth:`send_command`."""
        logger.warning('This method (send_system_command) is deprecated. Please use "send_command" instead.')
        body = SystemCommandBody(message=SystemCommand(command=command, payload=payload))
        return self._emit_envelope(OperationKind.SYSTEM_COMMAND, body, "send-system-command")

    def get_logs(self, lt_date: Optional[str] = None, limit: Optional[int] = None) -> dict[str, Any]:
        """Request past logs; they arrive as a local ``logs`` event."""
        return self._emit_envelope(OperationKind.LOGS, LogsBody(lt_date=lt_date, limit=limit), "logs")

    def force_disconnect(self) -> None:
        """Ask the server to drop this connection. Local state is untouched."""
        log.log_obj(logger, C2SEvent.FORCE_DISCONNECT)
        self._socket.emit(C2SEvent.FORCE_DISCONNECT)

    # -- upload -----------------------------------------------------------

    async def upload_attachment(self, file: FileInput, extra: Any = None) -> upload.UploadResult:
        """Upload an image. Never raises once started; see minarai.models.upload."""
        if not self.image_url:
            raise UploadNotConfiguredError()
        if self._upload_client is None:
            self._upload_client = UploadClient()

        identity = self._identity
        data = {
            key: str(value)
            for key, value in identity.to_wire().items()
            if value is not None
        }
        if extra is not None:
            data["params"] = json.dumps(extra)

        try:
            files = {"file": _read_file(file)}
            body = await self._upload_client.post_form(self.image_url, data=data, files=files)
        except Exception as err:
            logger.debug(f"upload failed: {err!r}")
            return upload.from_failure(err)
        result = upload.from_response(body, identity.application_id, identity.user_id)
        log.log_obj(logger, "upload", result)
        return result

    # -- teardown ---------------------------------------------------------

    async def disconnect(self) -> None:
        """Close the transport and forget the server-assigned client/user ids."""
        self._identity.reset()
        close = getattr(self._socket, "disconnect", None)
        if close is not None:
            await close()
        if self._upload_client is not None:
            await self._upload_client.close()
            self._upload_client = None


def _read_file(file: FileInput) -> tuple[str, bytes]:
    if isinstance(file, (str, Path)):
        path = Path(file)
        return path.name, path.read_bytes()
    name = os.path.basename(getattr(file, "name", "") or "file")
    return name, file.read()

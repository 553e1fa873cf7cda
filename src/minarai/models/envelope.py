"""
Outbound envelope — {id, head, body} sent over the realtime transport.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from minarai.models.identity import IdentityValue


class OperationKind(str, Enum):
    """Logical purpose of an outbound call.

    The value is the transport event name; :attr:`suffix` is appended to the
    envelope id.
    """

    MESSAGE = "message"
    COMMAND = "command"
    SYSTEM_COMMAND = "system-command"
    LOGS = "logs"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES = {
    OperationKind.MESSAGE: "",
    OperationKind.COMMAND: "-command",
    OperationKind.SYSTEM_COMMAND: "-system",
    OperationKind.LOGS: "-logs",
}


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class EnvelopeHead(_WireModel):
    application_id: IdentityValue = Field(default=None, alias="applicationId")
    client_id: IdentityValue = Field(default=None, alias="clientId")
    user_id: IdentityValue = Field(default=None, alias="userId")
    device_id: IdentityValue = Field(default=None, alias="deviceId")
    lang: Optional[str] = None
    timestamp_unix_time: int = Field(alias="timestampUnixTime")


class MessageBody(_WireModel):
    message: Any = None
    position: Any = Field(default_factory=dict)
    extra: Any = Field(default_factory=dict)


class CommandBody(_WireModel):
    name: str
    extra: Any = None


class SystemCommand(_WireModel):
    command: Any = None
    payload: Any = None


class SystemCommandBody(_WireModel):
    message: SystemCommand


class LogsBody(_WireModel):
    lt_date: Optional[str] = Field(default=None, alias="ltDate")
    limit: Optional[int] = None


EnvelopeBody = Union[MessageBody, CommandBody, SystemCommandBody, LogsBody]

BODY_TYPES: dict[OperationKind, type] = {
    OperationKind.MESSAGE: MessageBody,
    OperationKind.COMMAND: CommandBody,
    OperationKind.SYSTEM_COMMAND: SystemCommandBody,
    OperationKind.LOGS: LogsBody,
}


class Envelope(_WireModel):
    id: str
    kind: OperationKind = Field(exclude=True)
    head: EnvelopeHead
    body: EnvelopeBody

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)

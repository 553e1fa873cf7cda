"""
Event names for the realtime transport and the client's local event stream.
"""

from typing import Any, NamedTuple, Optional


class S2CEvent:
    """Server → client events delivered by the transport."""
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    JOINED = "joined"
    SYNC = "sync"
    SYNC_SYSTEM_COMMAND = "sync-system-command"
    SYNC_COMMAND = "sync-command"
    MESSAGE = "message"
    OPERATOR_COMMAND = "operator-command"
    SYSTEM_MESSAGE = "system-message"
    LOGS = "logs"


class C2SEvent:
    """Client → server events emitted on the transport."""
    JOIN_AS_CLIENT = "join-as-client"
    MESSAGE = "message"
    SYSTEM_COMMAND = "system-command"
    COMMAND = "command"
    LOGS = "logs"
    FORCE_DISCONNECT = "force-disconnect"


class LocalEvent:
    """Events republished on the client's own event stream."""
    CONNECT = "connect"
    DISCONNECTED = "disconnected"
    JOINED = "joined"
    SYNC = "sync"
    SYNC_SYSTEM_COMMAND = "sync-system-command"
    SYNC_COMMAND = "sync-command"
    MESSAGE = "message"
    OPERATOR_COMMAND = "operator-command"
    SYSTEM_MESSAGE = "system-message"
    LOGS = "logs"


# Registration order matters only for readability of debug logs.
INBOUND_EVENTS = (
    S2CEvent.CONNECT,
    S2CEvent.DISCONNECT,
    S2CEvent.JOINED,
    S2CEvent.SYNC,
    S2CEvent.SYNC_SYSTEM_COMMAND,
    S2CEvent.SYNC_COMMAND,
    S2CEvent.MESSAGE,
    S2CEvent.OPERATOR_COMMAND,
    S2CEvent.SYSTEM_MESSAGE,
    S2CEvent.LOGS,
)

# Inbound names that are renamed when republished. Everything else keeps its name.
RENAMED_EVENTS = {S2CEvent.DISCONNECT: LocalEvent.DISCONNECTED}


class InboundEvent(NamedTuple):
    name: str
    payload: Optional[Any] = None


class RepublishedEvent(NamedTuple):
    name: str
    args: tuple = ()


def republished_name(inbound: str) -> str:
    if inbound not in INBOUND_EVENTS:
        raise ValueError(f"Unknown inbound event: {inbound}")
    return RENAMED_EVENTS.get(inbound, inbound)


def republish(event: InboundEvent) -> RepublishedEvent:
    """Map an inbound transport event to the local event it becomes.

    ``disconnect`` carries the transport's reason, which is not part of the
    local ``disconnected`` event.
    """
    name = republished_name(event.name)
    if event.name in (S2CEvent.CONNECT, S2CEvent.DISCONNECT):
        return RepublishedEvent(name)
    return RepublishedEvent(name, (event.payload,))

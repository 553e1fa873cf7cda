"""
minarai-client — Minarai chat client for Python.

Socket.IO session client with identity reconciliation, versioned message
envelopes and image upload.
"""

from minarai.client import MinaraiClient
from minarai.errors import MinaraiError, InvalidArgumentError, UploadNotConfiguredError, ConnectionError
from minarai.events import EventStream
from minarai.models.events import C2SEvent, S2CEvent, LocalEvent
from minarai.models.identity import Identity

__version__ = "0.1.0"
__all__ = [
    "MinaraiClient",
    "EventStream",
    "Identity",
    "MinaraiError",
    "InvalidArgumentError",
    "UploadNotConfiguredError",
    "ConnectionError",
    "C2SEvent",
    "S2CEvent",
    "LocalEvent",
]

"""
Envelope construction.
"""

import time
from typing import Any, Optional

from minarai.models.envelope import BODY_TYPES, Envelope, EnvelopeHead, OperationKind
from minarai.models.identity import Identity


def now_ms() -> int:
    return int(time.time() * 1000)


def envelope_id(identity: Identity, timestamp: int, kind: OperationKind) -> str:
    """Correlation id: identity fields, timestamp, operation-kind suffix.

    Human-readable and locally unique per (identity, ms, kind); not random.
    """
    return f"{identity.id_prefix()}-{timestamp}{kind.suffix}"


def build_envelope(
    kind: OperationKind,
    identity: Identity,
    body: Any,
    lang: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> Envelope:
    """Build an outbound envelope.

    ``timestamp`` is read once and shared by ``id`` and
    ``head.timestampUnixTime``. ``body`` may be a body model or a plain dict
    validated against the model for ``kind``.
    """
    ts = now_ms() if timestamp is None else timestamp
    body_type = BODY_TYPES[kind]
    if not isinstance(body, body_type):
        body = body_type.model_validate(body)
    return Envelope(
        id=envelope_id(identity, ts, kind),
        kind=kind,
        head=EnvelopeHead(
            application_id=identity.application_id,
            client_id=identity.client_id,
            user_id=identity.user_id,
            device_id=identity.device_id,
            lang=lang,
            timestamp_unix_time=ts,
        ),
        body=body,
    )

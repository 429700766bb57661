"""Protocolos e modelos de fronteira do cliente Botmatic."""

from botmatic.protocols.models import TransportOutcome, TransportRequest
from botmatic.protocols.transport import TransportProtocol

__all__ = [
    "TransportOutcome",
    "TransportProtocol",
    "TransportRequest",
]

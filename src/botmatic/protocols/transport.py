"""Protocolo de transporte usado pelo cliente.

Permite trocar o adapter httpx por um fake nos testes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import TransportOutcome, TransportRequest


class TransportProtocol(Protocol):
    """Contrato mínimo: uma requisição, um resultado, sem retries."""

    async def send(self, request: TransportRequest) -> TransportOutcome: ...

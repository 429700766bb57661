"""Modelos trocados entre o cliente e o transporte HTTP."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from botmatic.connectors.methods import HttpMethod


@dataclass(frozen=True)
class TransportRequest:
    """Requisição a ser enviada. Construída por chamada, nunca persistida."""

    method: HttpMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass(frozen=True)
class TransportOutcome:
    """Resultado bruto de uma chamada HTTP.

    Ou `error` (falha antes de qualquer resposta HTTP) ou
    `status_code` + `body` (texto cru, ainda não decodificado).
    """

    status_code: int | None = None
    body: Any = None
    error: Exception | None = None

    @classmethod
    def from_error(cls, error: Exception) -> TransportOutcome:
        return cls(error=error)

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> TransportOutcome:
        return cls(status_code=status_code, body=body)

    @property
    def is_transport_error(self) -> bool:
        return self.error is not None

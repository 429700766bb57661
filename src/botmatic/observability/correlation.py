"""Gerenciamento de correlation_id para rastreamento de chamadas.

Usa ContextVar para ser async-safe: cada task asyncio enxerga o seu.
O BotmaticClient abre um escopo por chamada: mantém o id do chamador
ou gera um novo, e restaura o anterior ao terminar.

Uso:
    from botmatic.observability import reset_correlation_id, set_correlation_id

    token = set_correlation_id(request_id)
    try:
        await client.create_contact(contact, api_token)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (string vazia se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())

"""Configuração centralizada de logging.

Uso:
    from botmatic.config.logging import configure_logging, get_logger

    # Na inicialização da aplicação que usa o cliente
    configure_logging()  # nível vem de LOG_LEVEL

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("botmatic_call", extra={"latency_ms": 42})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from botmatic.config.logging.filters import CorrelationIdFilter
from botmatic.config.logging.formatters import create_json_formatter
from botmatic.config.settings import get_botmatic_settings
from botmatic.observability import get_correlation_id

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "botmatic_client"


def configure_logging(
    level: str | None = None,
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez na inicialização. Sem getter explícito,
    usa o correlation_id do ContextVar de botmatic.observability.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Se None, usa `log_level` das settings (env LOG_LEVEL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    if level is None:
        level = get_botmatic_settings().log_level
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)

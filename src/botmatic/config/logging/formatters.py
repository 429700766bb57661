"""Formatters de logging estruturado.

Logs JSON com campos fixos para que qualquer chamada à API Botmatic
possa ser rastreada pelo correlation_id.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18T10:30:00",
            "level": "WARNING",
            "logger": "botmatic.connectors.normalizer",
            "message": "botmatic_status_mismatch",
            "correlation_id": "abc-123",
            "service": "botmatic_client",
            "status_code": 404
        }
    """
    # Ordem estável para facilitar leitura dos logs
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )

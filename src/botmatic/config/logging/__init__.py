"""Configuração de logging estruturado.

Uso:
    from botmatic.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="botmatic_client")
    logger = get_logger(__name__)

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from botmatic.config.logging.config import configure_logging, get_logger
from botmatic.config.logging.filters import CorrelationIdFilter
from botmatic.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]

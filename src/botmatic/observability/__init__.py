"""Observabilidade — correlation_id e métricas via logs estruturados.

Uso:
    from botmatic.observability import get_correlation_id, set_correlation_id
    from botmatic.observability import record_latency
"""

from botmatic.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from botmatic.observability.metrics import record_latency

__all__ = [
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "reset_correlation_id",
    "set_correlation_id",
]

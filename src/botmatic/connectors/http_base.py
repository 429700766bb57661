"""Transporte HTTP para a API Botmatic.

Uma chamada, uma requisição: sem retries e sem política de timeout
além do valor configurado (por padrão o mesmo do httpx).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from botmatic.config.settings import DEFAULT_REQUEST_TIMEOUT_SECONDS
from botmatic.observability import get_correlation_id, record_latency
from botmatic.protocols.models import TransportOutcome

if TYPE_CHECKING:
    from botmatic.protocols.models import TransportRequest

logger = logging.getLogger(__name__)

_COMPONENT = "botmatic_transport"


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True


class HttpTransport:
    """Executa requisições via httpx e devolve TransportOutcome.

    Falhas antes de uma resposta HTTP utilizável (DNS, conexão, timeout,
    protocolo, decodificação de Content-Encoding, redirects)
    são capturadas em `TransportOutcome.error`; qualquer status HTTP
    volta como resposta, sem interpretação.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def send(self, request: TransportRequest) -> TransportOutcome:
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                timeout=httpx.Timeout(self._config.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.request(
                    request.method.verb,
                    request.url,
                    json=request.body,
                    headers=request.headers,
                )
        except httpx.RequestError as exc:
            logger.debug(
                "botmatic_transport_failed",
                extra={
                    "component": _COMPONENT,
                    "method": request.method.verb,
                    "error_type": type(exc).__name__,
                },
            )
            return TransportOutcome.from_error(exc)
        finally:
            record_latency(
                _COMPONENT,
                request.method.verb.lower(),
                (time.perf_counter() - started) * 1000,
                get_correlation_id(),
            )

        return TransportOutcome.from_response(response.status_code, response.text)

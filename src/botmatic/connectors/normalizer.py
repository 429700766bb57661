"""Normalização de respostas da API Botmatic.

Único ponto que interpreta status HTTP e erros de transporte.
Qualquer resultado de chamada vira ApiSuccess ou ApiFailure:

1. Erro de transporte -> ApiFailure(error=<exceção>)
2. Status diferente do esperado para o verbo -> ApiFailure(error=<status>)
   (o body é descartado mesmo se existir)
3. Status esperado -> ApiSuccess(body=<JSON decodificado ou None>)

Body string inválido em resposta de sucesso levanta
MalformedResponseError: é violação de contrato da API, não falha esperada.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from botmatic.connectors.errors import MalformedResponseError
from botmatic.domain.results import ApiFailure, ApiResult, ApiSuccess
from botmatic.observability import get_correlation_id

if TYPE_CHECKING:
    from botmatic.connectors.methods import HttpMethod
    from botmatic.protocols.models import TransportOutcome

logger = logging.getLogger(__name__)

_COMPONENT = "botmatic_normalizer"


def process_response_body(body: Any, status_code: int | None = None) -> Any:
    """Decodifica o body quando necessário.

    Strings/bytes são tratados como JSON; vazio vira None (ex: 204);
    valores já estruturados passam direto.

    Raises:
        MalformedResponseError: Se o body não for UTF-8 ou JSON válido.
    """
    if isinstance(body, (bytes, str)):
        try:
            text = body.decode("utf-8") if isinstance(body, bytes) else body
            if not text.strip():
                return None
            return json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error(
                "botmatic_malformed_body",
                extra={
                    "component": _COMPONENT,
                    "status_code": status_code,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise MalformedResponseError(
                "Response JSON inválido", status_code=status_code
            ) from exc
    return body


def normalize_outcome(method: HttpMethod, outcome: TransportOutcome) -> ApiResult:
    """Converte o resultado bruto do transporte no formato uniforme.

    Args:
        method: Verbo usado e status esperado.
        outcome: Resultado do transporte (erro ou status + body).

    Returns:
        ApiSuccess com body normalizado ou ApiFailure com o erro.
    """
    if outcome.is_transport_error:
        logger.warning(
            "botmatic_transport_error",
            extra={
                "component": _COMPONENT,
                "method": method.verb,
                "error_type": type(outcome.error).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
        return ApiFailure(error=outcome.error)

    if outcome.status_code != method.return_code:
        # TODO: expor o body de erro quando o formato de erro da API Botmatic for documentado
        logger.warning(
            "botmatic_status_mismatch",
            extra={
                "component": _COMPONENT,
                "method": method.verb,
                "status_code": outcome.status_code,
                "expected_status": method.return_code,
                "correlation_id": get_correlation_id(),
            },
        )
        return ApiFailure(error=outcome.status_code)

    body = process_response_body(outcome.body, outcome.status_code)
    logger.debug(
        "botmatic_call_success",
        extra={
            "component": _COMPONENT,
            "method": method.verb,
            "status_code": outcome.status_code,
        },
    )
    return ApiSuccess(body=body)

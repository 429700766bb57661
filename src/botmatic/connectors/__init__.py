"""Conector Botmatic - único ponto de IO com a API.

Responsabilidades:
- Métodos HTTP e status esperados
- Transporte httpx
- Normalização de respostas
- Fachada de operações (contatos, propriedades, campanhas)
"""

from .client import BotmaticClient, build_headers, create_botmatic_client
from .errors import BotmaticError, MalformedResponseError
from .http_base import HttpClientConfig, HttpTransport
from .methods import DELETE, GET, METHODS, PATCH, POST, PUT, HttpMethod
from .normalizer import normalize_outcome, process_response_body

__all__ = [
    "DELETE",
    "GET",
    "METHODS",
    "PATCH",
    "POST",
    "PUT",
    "BotmaticClient",
    "BotmaticError",
    "HttpClientConfig",
    "HttpMethod",
    "HttpTransport",
    "MalformedResponseError",
    "build_headers",
    "create_botmatic_client",
    "normalize_outcome",
    "process_response_body",
]

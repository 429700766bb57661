"""Cliente assíncrono para a API do Botmatic.

Uso:
    from botmatic import create_botmatic_client

    client = create_botmatic_client()
    result = await client.create_contact(contact, token)

Variável de ambiente: BOTMATIC_BASE_URL (padrão https://app.botmatic.ai).
"""

from botmatic.connectors import (
    BotmaticClient,
    BotmaticError,
    MalformedResponseError,
    create_botmatic_client,
)
from botmatic.domain import (
    NOT_IMPLEMENTED_ERROR,
    ApiFailure,
    ApiSuccess,
    CreateManyResult,
    CreateResult,
    OperationResult,
)

__all__ = [
    "NOT_IMPLEMENTED_ERROR",
    "ApiFailure",
    "ApiSuccess",
    "BotmaticClient",
    "BotmaticError",
    "CreateManyResult",
    "CreateResult",
    "MalformedResponseError",
    "OperationResult",
    "create_botmatic_client",
]

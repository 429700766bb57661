"""Cliente da API Botmatic (contatos, propriedades e campanhas).

Cada operação monta URL e body, envia uma requisição autenticada com
Bearer token e adapta o resultado normalizado ao formato público.

Falhas esperadas (rede, status, resposta sem id) nunca levantam exceção:
voltam com `success=False`. Criação não é idempotente: cada chamada cria
um novo registro remoto.

Exemplo:
    client = create_botmatic_client()

    result = await client.create_contact({"email": "ana@example.com"}, token)
    if result.success:
        contact_id = result.id
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botmatic.config.settings import get_botmatic_settings
from botmatic.connectors.http_base import HttpClientConfig, HttpTransport
from botmatic.connectors.methods import METHODS
from botmatic.connectors.normalizer import normalize_outcome
from botmatic.domain.results import (
    ApiFailure,
    ApiSuccess,
    CreateManyResult,
    CreateResult,
    OperationResult,
    not_implemented,
)
from botmatic.observability import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from botmatic.protocols.models import TransportRequest

if TYPE_CHECKING:
    import httpx

    from botmatic.config.settings import BotmaticSettings
    from botmatic.connectors.methods import HttpMethod
    from botmatic.domain.results import ApiResult
    from botmatic.protocols.transport import TransportProtocol

logger: logging.Logger = logging.getLogger(__name__)


def build_headers(token: str) -> dict[str, str]:
    """Headers JSON + Bearer. O token não é validado localmente."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {token}",
    }


def _error_of(result: ApiResult) -> Any:
    return result.error if isinstance(result, ApiFailure) else None


def _body_field(result: ApiResult, name: str) -> Any:
    if isinstance(result, ApiSuccess) and isinstance(result.body, dict):
        return result.body.get(name)
    return None


class BotmaticClient:
    """Fachada assíncrona sobre a API REST do Botmatic.

    Não guarda estado além das settings (imutáveis) e do transporte;
    o token é recebido por chamada e nunca armazenado.
    """

    def __init__(
        self,
        settings: BotmaticSettings | None = None,
        transport: TransportProtocol | None = None,
    ) -> None:
        self._settings = settings or get_botmatic_settings()
        self._transport = transport or HttpTransport(
            HttpClientConfig(
                timeout_seconds=self._settings.request_timeout_seconds,
                verify_ssl=self._settings.verify_ssl,
            )
        )

    @property
    def settings(self) -> BotmaticSettings:
        return self._settings

    async def _send(
        self,
        method: HttpMethod,
        url: str,
        token: str,
        body: Any = None,
    ) -> ApiResult:
        request = TransportRequest(
            method=method,
            url=url,
            headers=build_headers(token),
            body=body,
        )
        # Logs de transporte e normalização da mesma chamada compartilham o id
        ctx_token = set_correlation_id(get_correlation_id() or None)
        try:
            outcome = await self._transport.send(request)
            return normalize_outcome(method, outcome)
        finally:
            reset_correlation_id(ctx_token)

    # Contatos

    async def create_contact(self, contact: dict[str, Any], token: str) -> CreateResult:
        """Cria um contato.

        Sucesso exige `id` no body: HTTP 201 sem id é tratado como falha.

        Returns:
            CreateResult(success=True, id=...) ou CreateResult(success=False, error=...)
        """
        logger.debug("botmatic_create_contact")
        result = await self._send(
            METHODS["post"], self._settings.contacts_endpoint, token, {"contact": contact}
        )

        contact_id = _body_field(result, "id")
        if result.success and contact_id is not None:
            return CreateResult(success=True, id=contact_id)
        return CreateResult(success=False, error=_error_of(result))

    async def create_contacts(
        self,
        contacts: list[dict[str, Any]],
        token: str,
    ) -> CreateManyResult:
        """Cria vários contatos em uma requisição.

        `contacts` do resultado vem da API sem validação por item,
        na mesma ordem do input.
        """
        logger.debug("botmatic_create_contacts", extra={"count": len(contacts)})
        result = await self._send(
            METHODS["post"], self._settings.contacts_endpoint, token, {"contacts": contacts}
        )

        if result.success:
            return CreateManyResult(success=True, contacts=_body_field(result, "contacts"))
        return CreateManyResult(success=False, error=_error_of(result))

    async def update_contact(self, contact: dict[str, Any], token: str) -> OperationResult:
        """Atualiza um contato existente.

        Raises:
            ValueError: Se o contato não tem `id`.
        """
        contact_id = contact.get("id")
        if contact_id is None:
            raise ValueError("contact['id'] é obrigatório para update_contact")

        logger.debug("botmatic_update_contact")
        result = await self._send(
            METHODS["patch"],
            self._settings.get_contact_endpoint(contact_id),
            token,
            {"contact_id": contact_id, "contact": contact},
        )
        return _operation_result(result)

    async def update_contacts(
        self,
        contacts: list[dict[str, Any]],
        token: str,
    ) -> OperationResult:
        """Atualiza vários contatos; a lista vai como body sem envelope."""
        logger.debug("botmatic_update_contacts", extra={"count": len(contacts)})
        result = await self._send(
            METHODS["patch"], self._settings.contacts_endpoint, token, contacts
        )
        return _operation_result(result)

    async def delete_contact(self, contact_id: str | int, token: str) -> OperationResult:
        """Remove um contato. A API responde 204 sem body.

        Raises:
            ValueError: Se contact_id vazio.
        """
        url = self._settings.get_contact_endpoint(contact_id)
        logger.debug("botmatic_delete_contact")
        result = await self._send(METHODS["delete"], url, token)
        return _operation_result(result)

    # Propriedades

    async def create_property(self, property_: dict[str, Any], token: str) -> CreateResult:
        """Cria uma propriedade (enviada como lista de um item)."""
        logger.debug("botmatic_create_property")
        result = await self._send(
            METHODS["post"],
            self._settings.properties_endpoint,
            token,
            {"properties": [property_]},
        )

        if isinstance(result, ApiSuccess) and result.body:
            return CreateResult(success=True, id=_body_field(result, "id"))
        return CreateResult(success=False, error=_error_of(result))

    async def create_properties(
        self,
        properties: list[dict[str, Any]],
        token: str,
    ) -> OperationResult:
        logger.debug("botmatic_create_properties", extra={"count": len(properties)})
        result = await self._send(
            METHODS["post"],
            self._settings.properties_endpoint,
            token,
            {"properties": properties},
        )
        return _operation_result(result)

    # Campanhas

    async def send_event_on_campaign(
        self,
        event_name: str,
        contact_ids: list[str | int],
        token: str,
    ) -> OperationResult:
        """Dispara um evento de campanha para uma lista de contatos."""
        logger.debug(
            "botmatic_send_event_on_campaign",
            extra={"event_name": event_name, "count": len(contact_ids)},
        )
        result = await self._send(
            METHODS["post"],
            self._settings.execute_event_endpoint,
            token,
            {"event_name": event_name, "contacts": contact_ids},
        )
        return _operation_result(result)

    # Não implementadas: existem para detecção de recurso, sem IO

    async def get_contact(self, *args: Any, **kwargs: Any) -> OperationResult:
        return not_implemented()

    async def get_contact_by_email(self, *args: Any, **kwargs: Any) -> OperationResult:
        return not_implemented()

    async def list_contacts(self, *args: Any, **kwargs: Any) -> OperationResult:
        return not_implemented()

    async def list_all_contacts(self, *args: Any, **kwargs: Any) -> OperationResult:
        return not_implemented()


def _operation_result(result: ApiResult) -> OperationResult:
    if result.success:
        return OperationResult(success=True)
    return OperationResult(success=False, error=_error_of(result))


def create_botmatic_client(
    settings: BotmaticSettings | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> BotmaticClient:
    """Factory para criar cliente Botmatic com config padrão.

    Args:
        settings: BotmaticSettings opcional. Se None, carrega do ambiente.
        http_transport: Transporte httpx alternativo (ex: httpx.MockTransport).

    Returns:
        Cliente configurado.

    Raises:
        ValueError: Se as settings não passam em BotmaticSettings.validate().
    """
    botmatic = settings or get_botmatic_settings()
    errors = botmatic.validate()
    if errors:
        logger.error("botmatic_settings_invalid", extra={"errors": errors})
        raise ValueError(f"Configuração Botmatic inválida: {'; '.join(errors)}")

    config = HttpClientConfig(
        timeout_seconds=botmatic.request_timeout_seconds,
        verify_ssl=botmatic.verify_ssl,
    )
    return BotmaticClient(
        settings=botmatic,
        transport=HttpTransport(config, transport=http_transport),
    )

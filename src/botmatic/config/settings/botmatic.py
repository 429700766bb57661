"""Settings da API Botmatic.

Configurações do cliente HTTP para a API de contatos do Botmatic.
Carregadas uma única vez do ambiente e nunca mutadas em runtime.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# URL de produção usada quando BOTMATIC_BASE_URL não está definida
BOTMATIC_BASE_URL: str = "https://app.botmatic.ai"

# Mesmo default de timeout do httpx
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 5.0

CONTACTS_PATH: str = "/api/contacts"
PROPERTIES_PATH: str = "/api/properties"
CAMPAIGNS_PATH: str = "/api/campaigns"


@dataclass(frozen=True)
class BotmaticSettings:
    """Configurações do cliente Botmatic.

    Attributes:
        api_base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout por requisição HTTP
        verify_ssl: Valida certificado TLS do servidor
        log_level: Nível de log usado no bootstrap
    """

    api_base_url: str = BOTMATIC_BASE_URL
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    verify_ssl: bool = True
    log_level: str = "INFO"

    @property
    def contacts_endpoint(self) -> str:
        """URL da coleção de contatos."""
        return f"{self.api_base_url}{CONTACTS_PATH}"

    @property
    def properties_endpoint(self) -> str:
        """URL da coleção de propriedades."""
        return f"{self.api_base_url}{PROPERTIES_PATH}"

    @property
    def campaigns_endpoint(self) -> str:
        """URL base de campanhas."""
        return f"{self.api_base_url}{CAMPAIGNS_PATH}"

    @property
    def execute_event_endpoint(self) -> str:
        """URL para disparar evento em campanha."""
        return f"{self.campaigns_endpoint}/execute-event"

    def get_contact_endpoint(self, contact_id: str | int) -> str:
        """Retorna URL de um contato específico.

        Args:
            contact_id: ID do contato no Botmatic.

        Returns:
            URL no formato: {base}/api/contacts/{id}

        Raises:
            ValueError: Se contact_id vazio.
        """
        if contact_id is None or str(contact_id).strip() == "":
            raise ValueError("contact_id é obrigatório")
        return f"{self.contacts_endpoint}/{contact_id}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("BOTMATIC_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("BOTMATIC_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> BotmaticSettings:
    """Carrega BotmaticSettings a partir de variáveis de ambiente."""
    base_url = os.getenv("BOTMATIC_BASE_URL", "") or BOTMATIC_BASE_URL
    return BotmaticSettings(
        api_base_url=base_url.rstrip("/"),
        request_timeout_seconds=float(
            os.getenv(
                "BOTMATIC_REQUEST_TIMEOUT_SECONDS",
                str(DEFAULT_REQUEST_TIMEOUT_SECONDS),
            )
        ),
        verify_ssl=os.getenv("BOTMATIC_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_botmatic_settings() -> BotmaticSettings:
    """Retorna instância cacheada de BotmaticSettings."""
    return _load_from_env()

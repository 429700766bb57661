"""Configuração do pytest para o cliente Botmatic."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from botmatic.config.settings import BotmaticSettings, get_botmatic_settings  # noqa: E402
from botmatic.connectors import BotmaticClient, create_botmatic_client  # noqa: E402

TEST_BASE_URL = "https://botmatic.test"
TEST_TOKEN = "<BOTMATIC_INTEGRATION_TOKEN>"


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Evita que settings cacheadas vazem entre testes."""
    get_botmatic_settings.cache_clear()
    yield
    get_botmatic_settings.cache_clear()


@pytest.fixture
def settings() -> BotmaticSettings:
    return BotmaticSettings(api_base_url=TEST_BASE_URL)


@pytest.fixture
def token() -> str:
    return TEST_TOKEN


@pytest.fixture
def make_client(
    settings: BotmaticSettings,
) -> Callable[[Callable[[httpx.Request], httpx.Response]], BotmaticClient]:
    """Cria cliente real com transporte httpx.MockTransport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> BotmaticClient:
        return create_botmatic_client(settings, http_transport=httpx.MockTransport(handler))

    return _make

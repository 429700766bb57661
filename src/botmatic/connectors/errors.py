"""Exceções do cliente Botmatic.

Falhas esperadas (rede, status, resposta sem id) voltam como dados no
resultado. Só escapam como exceção as violações de contrato.
"""

from __future__ import annotations


class BotmaticError(Exception):
    """Base das exceções do cliente Botmatic."""


class MalformedResponseError(BotmaticError, ValueError):
    """Body de uma resposta bem-sucedida não é JSON válido.

    Indica que a API violou o próprio contrato; não vira resultado.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

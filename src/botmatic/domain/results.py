"""Tipos de resultado do cliente Botmatic.

Dois níveis:
- ApiSuccess / ApiFailure: saída do normalizador, união de duas variantes.
  Sucesso carrega apenas `body`; falha carrega apenas `error`.
- OperationResult / CreateResult / CreateManyResult: formato público
  retornado pelas operações do cliente.

`as_dict()` omite campos ausentes, então um sucesso nunca expõe `error`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Literal, Union

NOT_IMPLEMENTED_ERROR = "Not implemented"


@dataclass(frozen=True)
class ApiSuccess:
    """Resposta com status esperado e body já decodificado."""

    body: Any = None
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class ApiFailure:
    """Falha de transporte ou status inesperado.

    `error` é o status HTTP (int) ou a exceção de transporte.
    """

    error: Any
    success: Literal[False] = field(default=False, init=False)


ApiResult = Union[ApiSuccess, ApiFailure]


class _PublicResult:
    """Mixin de serialização para os resultados públicos."""

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if f.name == "success" or value is not None:
                out[f.name] = value
        return out


@dataclass(frozen=True)
class OperationResult(_PublicResult):
    """Resultado de update, delete, evento de campanha e afins."""

    success: bool
    error: Any = None


@dataclass(frozen=True)
class CreateResult(_PublicResult):
    """Resultado de criação unitária (contato ou propriedade)."""

    success: bool
    id: Any = None
    error: Any = None


@dataclass(frozen=True)
class CreateManyResult(_PublicResult):
    """Resultado de criação em lote.

    `contacts` é a lista por item devolvida pela API
    ({success, id, error}), na mesma ordem do input.
    """

    success: bool
    contacts: list[dict[str, Any]] | None = None
    error: Any = None


def not_implemented() -> OperationResult:
    """Resultado determinístico das operações ainda não suportadas."""
    return OperationResult(success=False, error=NOT_IMPLEMENTED_ERROR)

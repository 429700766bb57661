"""Métodos HTTP e o status de sucesso esperado para cada um."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class HttpMethod:
    """Verbo HTTP e o único status considerado sucesso."""

    verb: str
    return_code: int


GET = HttpMethod(verb="GET", return_code=200)  # 200 OK, READ
POST = HttpMethod(verb="POST", return_code=201)  # 201 Created, CREATE
PUT = HttpMethod(verb="PUT", return_code=200)  # 200 OK, UPDATE
PATCH = HttpMethod(verb="PATCH", return_code=200)  # 200 OK, UPDATE
DELETE = HttpMethod(verb="DELETE", return_code=204)  # 204 No Content, DELETE

# Somente leitura durante toda a vida do processo
METHODS: MappingProxyType[str, HttpMethod] = MappingProxyType(
    {m.verb.lower(): m for m in (GET, POST, PUT, PATCH, DELETE)}
)

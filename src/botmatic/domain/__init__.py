"""Modelos de domínio do cliente Botmatic."""

from botmatic.domain.results import (
    NOT_IMPLEMENTED_ERROR,
    ApiFailure,
    ApiResult,
    ApiSuccess,
    CreateManyResult,
    CreateResult,
    OperationResult,
    not_implemented,
)

__all__ = [
    "NOT_IMPLEMENTED_ERROR",
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "CreateManyResult",
    "CreateResult",
    "OperationResult",
    "not_implemented",
]

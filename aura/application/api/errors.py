"""Centralized error transformation for API routes.

Maps Aura errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from aura.domain.shared.error import (
    ArchiveError,
    AuraError,
    DomainError,
    InfrastructureError,
    InvalidFormatError,
    NotFoundError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    InvalidFormatError: 400,
    ValidationError: 422,
    ArchiveError: 422,
}


def map_aura_error(error: AuraError) -> HTTPException:
    """Map an Aura error to an HTTPException."""
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, ValidationError) and error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=status_code, detail=detail)

    return HTTPException(status_code=500, detail=detail)

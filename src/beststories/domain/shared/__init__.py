"""Shared domain building blocks."""

from beststories.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
]

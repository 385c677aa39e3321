"""Shared HTTP-aware application exceptions."""

from apps._shared.exceptions.base import (
    ApplicationError,
    BadRequestError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    UnauthorizedError,
)
from apps._shared.exceptions.handlers import register_exception_handlers

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "ExternalServiceError",
    "NotFoundError",
    "UnauthorizedError",
    "register_exception_handlers",
]

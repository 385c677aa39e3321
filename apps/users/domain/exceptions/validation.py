"""Validation Exceptions."""

from __future__ import annotations

from apps.users.domain.exceptions.base import DomainError


class InvalidValueError(DomainError, ValueError):
    """Value Object 검증 실패."""

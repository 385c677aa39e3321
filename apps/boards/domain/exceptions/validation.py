"""Validation Exceptions."""

from __future__ import annotations

from apps.boards.domain.exceptions.base import DomainError


class InvalidValueError(DomainError, ValueError):
    """게시글 값 검증 실패."""

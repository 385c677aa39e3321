"""Domain Exceptions."""

from apps.boards.domain.exceptions.base import DomainError
from apps.boards.domain.exceptions.validation import InvalidValueError

__all__ = ["DomainError", "InvalidValueError"]

"""Domain Exceptions."""

from apps.users.domain.exceptions.base import DomainError
from apps.users.domain.exceptions.user import AssetNotConnectedError
from apps.users.domain.exceptions.validation import InvalidValueError

__all__ = ["DomainError", "InvalidValueError", "AssetNotConnectedError"]

"""UserId Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class UserId(ValueObject):
    """사용자 식별자 (users.users.id)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise InvalidValueError(f"Invalid user id: {self.value!r}")

    @classmethod
    def of(cls, value: int | str) -> "UserId":
        if isinstance(value, str):
            if not value.isdigit():
                raise InvalidValueError(f"Invalid user id: {value!r}")
            value = int(value)
        return cls(value=value)

    def to_int(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

"""Nickname Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject

MAX_NICKNAME_LENGTH = 20


@dataclass(frozen=True, slots=True)
class Nickname(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueError("닉네임은 비어 있을 수 없습니다.")
        if len(self.value.strip()) > MAX_NICKNAME_LENGTH:
            raise InvalidValueError(f"닉네임은 {MAX_NICKNAME_LENGTH}글자 이하여야 합니다.")
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def of(cls, value: str) -> "Nickname":
        return cls(value=value)

    def __str__(self) -> str:
        return self.value

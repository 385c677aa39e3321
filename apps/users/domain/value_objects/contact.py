"""Contact Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject

# 010, 011, 016~019 로 시작하는 11자리 휴대폰 번호 (하이픈 없음)
CONTACT_PATTERN = re.compile(r"^01(?:0|1|[6-9])\d{8}$")


@dataclass(frozen=True, slots=True)
class Contact(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not CONTACT_PATTERN.fullmatch(self.value):
            raise InvalidValueError("전화 번호 형식이 아닙니다.")

    @classmethod
    def of(cls, value: str) -> "Contact":
        return cls(value=value)

    @staticmethod
    def is_valid(value: str) -> bool:
        return isinstance(value, str) and CONTACT_PATTERN.fullmatch(value) is not None

    def __str__(self) -> str:
        return self.value

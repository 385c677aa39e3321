"""TofinId Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject

TOFIN_ID_PATTERN = re.compile(r"^[A-Za-z0-9]{8,30}$")


@dataclass(frozen=True, slots=True)
class TofinId(ValueObject):
    """로그인 아이디.

    8~30글자의 영문/숫자로만 구성됩니다.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not TOFIN_ID_PATTERN.fullmatch(self.value):
            raise InvalidValueError("아이디는 8~30글자 사이, 영문+숫자 형식이어야 합니다.")

    @classmethod
    def of(cls, value: str) -> "TofinId":
        return cls(value=value)

    def __str__(self) -> str:
        return self.value

"""Birth Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class Birth(ValueObject):
    """생년월일. 미래 날짜는 허용하지 않습니다."""

    value: date

    def __post_init__(self) -> None:
        if not isinstance(self.value, date):
            raise InvalidValueError("생년월일 형식이 올바르지 않습니다.")
        if self.value > date.today():
            raise InvalidValueError("생년월일은 미래일 수 없습니다.")

    @classmethod
    def of(cls, value: date | str) -> "Birth":
        """date 또는 ISO 형식(YYYY-MM-DD) 문자열로 생성합니다."""
        if isinstance(value, str):
            try:
                value = date.fromisoformat(value)
            except ValueError:
                raise InvalidValueError("생년월일 형식이 올바르지 않습니다.") from None
        return cls(value=value)

    def to_date(self) -> date:
        return self.value

    def __str__(self) -> str:
        return self.value.isoformat()

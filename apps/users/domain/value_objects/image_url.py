"""ImageUrl Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.users.domain.exceptions.validation import InvalidValueError
from apps.users.domain.value_objects.base import ValueObject

MAX_URL_LENGTH = 500


@dataclass(frozen=True, slots=True)
class ImageUrl(ValueObject):
    """프로필 이미지 URL (선택)."""

    value: str | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        if not isinstance(self.value, str) or not self.value.startswith(("http://", "https://")):
            raise InvalidValueError("이미지 URL 형식이 올바르지 않습니다.")
        if len(self.value) > MAX_URL_LENGTH:
            raise InvalidValueError(f"이미지 URL은 {MAX_URL_LENGTH}자 이하여야 합니다.")

    @classmethod
    def of(cls, value: str | None) -> "ImageUrl":
        # 빈 문자열은 이미지 없음으로 취급
        return cls(value=value or None)

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return self.value or ""

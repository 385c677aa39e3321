"""Value Object base class."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValueObject:
    """불변 Value Object 기반 클래스.

    하위 클래스는 ``__post_init__``에서 자기 검증을 수행합니다.
    """

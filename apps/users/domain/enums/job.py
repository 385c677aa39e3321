"""Job enum."""

from __future__ import annotations

from enum import Enum


class Job(str, Enum):
    """사용자 직업."""

    STUDENT = "STUDENT"
    OFFICE_WORKER = "OFFICE_WORKER"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    FREELANCER = "FREELANCER"
    HOUSEWIFE = "HOUSEWIFE"
    UNEMPLOYED = "UNEMPLOYED"
    ETC = "ETC"

    @classmethod
    def of(cls, value: str) -> "Job":
        """이름으로 Job을 찾습니다 (대소문자 무시).

        Raises:
            ValueError: 알 수 없는 직업
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown job: {value}") from None

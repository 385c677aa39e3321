"""User domain exceptions."""

from __future__ import annotations

from apps.users.domain.exceptions.base import DomainError


class AssetNotConnectedError(DomainError):
    """자산 연결 전에 자산 관련 설정을 변경하려 할 때 발생."""

    def __init__(self) -> None:
        super().__init__("자산 연결부터 하세요")

"""User gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.users.domain.entities.user import User
    from apps.users.domain.value_objects import TofinId, UserId


class CreateUserOutputPort(Protocol):
    """사용자 생성 포트."""

    async def create(self, user: User) -> User:
        """새 사용자를 생성합니다.

        NormalUser인 경우 세부 정보 행도 함께 생성합니다.

        Returns:
            id가 할당된 사용자
        """
        ...


class ReadUserOutputPort(Protocol):
    """사용자 조회 포트."""

    async def find_by_tofin_id(self, tofin_id: TofinId) -> User | None:
        """로그인 아이디로 조회합니다."""
        ...

    async def find_by_user_id(self, user_id: UserId) -> User | None:
        """사용자 ID로 조회합니다."""
        ...

    async def is_exists_by_tofin_id(self, tofin_id: TofinId) -> bool:
        """로그인 아이디 사용 여부를 확인합니다."""
        ...

"""NormalUser detail gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.users.domain.entities.user import NormalUser
    from apps.users.domain.value_objects import Contact, UserId


class ReadNormalUserOutputPort(Protocol):
    """일반 사용자 세부 정보 조회 포트."""

    async def find_by_user_id(self, user_id: UserId) -> NormalUser | None:
        """세부 정보가 있는 일반 사용자를 조회합니다. 세부 정보가 없으면 None."""
        ...

    async def exists_by_contact(
        self,
        contact: Contact,
        *,
        exclude_user_id: UserId | None = None,
    ) -> bool:
        """전화번호가 이미 연결되어 있는지 확인합니다.

        Args:
            contact: 전화번호
            exclude_user_id: 검사에서 제외할 사용자 (본인)
        """
        ...


class SaveUserDetailOutputPort(Protocol):
    """일반 사용자 세부 정보 저장 포트."""

    async def save(self, user: NormalUser) -> NormalUser:
        """세부 정보를 저장합니다 (없으면 생성)."""
        ...

"""RefreshToken store port.

사용자당 하나의 리프레시 토큰만 유효하도록 관리합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.users.domain.value_objects import UserId


class RefreshTokenOutputPort(Protocol):
    """리프레시 토큰 저장소 인터페이스.

    구현체:
        - RedisRefreshTokenStore (infrastructure/persistence_redis/)
    """

    async def save_only_one_user(
        self,
        user_id: UserId,
        refresh_token: str,
        expires_at: int,
    ) -> None:
        """리프레시 토큰을 저장하고 해당 사용자의 기존 토큰은 무효화합니다.

        Args:
            user_id: 사용자 ID
            refresh_token: 새 리프레시 토큰
            expires_at: 만료 시각 (Unix timestamp)
        """
        ...

    async def delete_by_refresh_token(self, refresh_token: str) -> UserId | None:
        """리프레시 토큰을 소비(삭제)하고 소유자를 반환합니다.

        이미 소비되었거나 존재하지 않으면 None을 반환합니다.
        """
        ...

"""TokenIssuer Port.

JWT 토큰 발급을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps._shared.security import TokenableUser


@dataclass(frozen=True)
class TokenInfo:
    """발급된 토큰 쌍."""

    access_token: str
    refresh_token: str
    access_expires_at: int
    refresh_expires_at: int
    grant_type: str = "Bearer"


class TokenIssuer(Protocol):
    """토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def generate_token(self, user: TokenableUser) -> TokenInfo:
        """액세스/리프레시 토큰 쌍 발급.

        Args:
            user: 토큰에 담을 사용자 정보

        Returns:
            토큰 쌍
        """
        ...

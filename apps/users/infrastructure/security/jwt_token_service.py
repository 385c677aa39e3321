"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from jose import jwt

from apps._shared.security import TokenType
from apps.users.application.token.ports import TokenInfo

if TYPE_CHECKING:
    from apps._shared.security import TokenableUser


class JwtTokenService:
    """JWT 토큰 서비스.

    액세스/리프레시 토큰 모두 사용자 클레임을 담습니다.
    리프레시 토큰의 유효성은 서명이 아니라 저장소 존재 여부로 판단합니다.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "users-api",
        audience: str = "tofin-api",
        access_token_expire_minutes: int = 30,
        refresh_token_expire_minutes: int = 20160,  # 14일
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_expire = timedelta(minutes=access_token_expire_minutes)
        self._refresh_token_expire = timedelta(minutes=refresh_token_expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def _create_token(
        self,
        *,
        user: "TokenableUser",
        token_type: TokenType,
        expires_delta: timedelta,
    ) -> tuple[str, int]:
        now = self._now_timestamp()
        expires_at = now + int(expires_delta.total_seconds())

        payload: dict[str, Any] = {
            **user.to_claims(),
            "jti": str(uuid.uuid4()),
            "type": token_type.value,
            "exp": expires_at,
            "iat": now,
            "nbf": now,
            "iss": self._issuer,
            "aud": self._audience,
        }

        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token, expires_at

    def generate_token(self, user: "TokenableUser") -> TokenInfo:
        """토큰 쌍 발급."""
        access_token, access_exp = self._create_token(
            user=user,
            token_type=TokenType.ACCESS,
            expires_delta=self._access_token_expire,
        )
        refresh_token, refresh_exp = self._create_token(
            user=user,
            token_type=TokenType.REFRESH,
            expires_delta=self._refresh_token_expire,
        )
        return TokenInfo(
            access_token=access_token,
            refresh_token=refresh_token,
            access_expires_at=access_exp,
            refresh_expires_at=refresh_exp,
        )

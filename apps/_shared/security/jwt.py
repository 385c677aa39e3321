"""JWT claims shared by the token issuer (users) and its consumers (boards)."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from jose import JWTError, jwt
from pydantic import BaseModel

from apps._shared.exceptions import UnauthorizedError


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenableUser(BaseModel):
    """토큰에 담기는 사용자 정보."""

    id: int
    role: str
    job: str | None = None
    nickname: str
    profile_image: str | None = None
    birth: date | None = None

    def to_claims(self) -> dict[str, Any]:
        return {
            "sub": str(self.id),
            "role": self.role,
            "job": self.job,
            "nickname": self.nickname,
            "profileImage": self.profile_image,
            "birth": self.birth.isoformat() if self.birth else None,
        }

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "TokenableUser":
        return cls(
            id=int(claims["sub"]),
            role=claims["role"],
            job=claims.get("job"),
            nickname=claims["nickname"],
            profile_image=claims.get("profileImage"),
            birth=claims.get("birth"),
        )


def decode_token(
    token: str,
    *,
    secret: str,
    algorithm: str,
    issuer: str,
    audience: str,
    expected_type: TokenType = TokenType.ACCESS,
) -> TokenableUser:
    """서명과 타입을 검증하고 사용자 정보를 반환합니다.

    Raises:
        UnauthorizedError: 서명/만료/타입 검증 실패
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            audience=audience,
            issuer=issuer,
        )
    except JWTError as exc:
        if "expired" in str(exc).lower():
            raise UnauthorizedError("만료된 토큰입니다.") from exc
        raise UnauthorizedError("유효하지 않은 토큰입니다.") from exc

    if claims.get("type") != expected_type.value:
        raise UnauthorizedError("토큰 타입이 올바르지 않습니다.")

    try:
        return TokenableUser.from_claims(claims)
    except (KeyError, ValueError) as exc:
        raise UnauthorizedError("유효하지 않은 토큰입니다.") from exc

"""FastAPI dependency factory for access-token authentication."""

from __future__ import annotations

from typing import Callable, Optional

from fastapi import Depends, Header

from apps._shared.exceptions import UnauthorizedError
from apps._shared.security.jwt import TokenableUser, TokenType, decode_token


def parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def build_auth_user_dependency(get_settings: Callable) -> Callable:
    """Authorization 헤더의 액세스 토큰을 검증하는 의존성을 생성합니다.

    settings에는 ``jwt_secret_key``, ``jwt_algorithm``, ``jwt_issuer``,
    ``jwt_audience`` 필드가 있어야 합니다.
    """

    async def dependency(
        authorization: Optional[str] = Header(default=None),
        settings=Depends(get_settings),
    ) -> TokenableUser:
        if not authorization:
            raise UnauthorizedError("Missing authorization header")

        token = parse_bearer(authorization)
        if token is None:
            raise UnauthorizedError("Invalid authorization format")

        return decode_token(
            token,
            secret=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expected_type=TokenType.ACCESS,
        )

    return dependency

"""JwtTokenService 단위 테스트."""

from datetime import date

import pytest
from jose import jwt

from apps._shared.exceptions import UnauthorizedError
from apps._shared.security import TokenableUser, TokenType, decode_token
from apps.users.infrastructure.security import JwtTokenService

SECRET = "test-secret-key"


def _decode(token: str, expected_type: TokenType = TokenType.ACCESS) -> TokenableUser:
    """리소스 서버와 같은 설정으로 검증."""
    return decode_token(
        token,
        secret=SECRET,
        algorithm="HS256",
        issuer="users-api",
        audience="tofin-api",
        expected_type=expected_type,
    )


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(
        secret_key=SECRET,
        issuer="users-api",
        audience="tofin-api",
        access_token_expire_minutes=30,
        refresh_token_expire_minutes=60,
    )


@pytest.fixture
def tokenable_user() -> TokenableUser:
    return TokenableUser(
        id=42,
        role="NORMAL",
        job="STUDENT",
        nickname="토핀",
        profile_image=None,
        birth=date(1998, 3, 14),
    )


class TestJwtTokenService:
    """JwtTokenService 테스트."""

    def test_generate_token_claims(
        self,
        token_service: JwtTokenService,
        tokenable_user: TokenableUser,
    ) -> None:
        token_info = token_service.generate_token(tokenable_user)

        claims = jwt.decode(
            token_info.access_token,
            SECRET,
            algorithms=["HS256"],
            audience="tofin-api",
            issuer="users-api",
        )
        assert claims["sub"] == "42"
        assert claims["role"] == "NORMAL"
        assert claims["job"] == "STUDENT"
        assert claims["nickname"] == "토핀"
        assert claims["birth"] == "1998-03-14"
        assert claims["type"] == "access"
        assert claims["exp"] == token_info.access_expires_at
        assert token_info.grant_type == "Bearer"
        assert token_info.refresh_expires_at > token_info.access_expires_at

    def test_tokens_are_unique(
        self,
        token_service: JwtTokenService,
        tokenable_user: TokenableUser,
    ) -> None:
        first = token_service.generate_token(tokenable_user)
        second = token_service.generate_token(tokenable_user)
        assert first.refresh_token != second.refresh_token

    def test_decode_round_trip(
        self,
        token_service: JwtTokenService,
        tokenable_user: TokenableUser,
    ) -> None:
        token_info = token_service.generate_token(tokenable_user)

        decoded = _decode(token_info.access_token)

        assert decoded == tokenable_user

    def test_refresh_token_rejected_as_access(
        self,
        token_service: JwtTokenService,
        tokenable_user: TokenableUser,
    ) -> None:
        token_info = token_service.generate_token(tokenable_user)

        with pytest.raises(UnauthorizedError, match="토큰 타입이 올바르지 않습니다."):
            _decode(token_info.refresh_token, TokenType.ACCESS)

    def test_wrong_secret(
        self,
        tokenable_user: TokenableUser,
    ) -> None:
        other = JwtTokenService(secret_key="other", issuer="users-api", audience="tofin-api")
        token_info = other.generate_token(tokenable_user)

        with pytest.raises(UnauthorizedError, match="유효하지 않은 토큰입니다."):
            _decode(token_info.access_token)

    def test_expired_token(
        self,
        tokenable_user: TokenableUser,
    ) -> None:
        service = JwtTokenService(
            secret_key=SECRET,
            issuer="users-api",
            audience="tofin-api",
            access_token_expire_minutes=-5,
        )
        token_info = service.generate_token(tokenable_user)

        with pytest.raises(UnauthorizedError, match="만료된 토큰입니다."):
            _decode(token_info.access_token)

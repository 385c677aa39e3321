"""Shared kernel test fixtures."""

from __future__ import annotations

import time
from dataclasses import dataclass

import pytest
from jose import jwt

SECRET = "shared-test-secret"
ISSUER = "users-api"
AUDIENCE = "tofin-api"


@dataclass
class FakeSettings:
    jwt_secret_key: str = SECRET
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = ISSUER
    jwt_audience: str = AUDIENCE


@pytest.fixture
def settings() -> FakeSettings:
    return FakeSettings()


@pytest.fixture
def make_token():
    """클레임을 덮어쓸 수 있는 토큰 생성기."""

    def _make(token_type: str = "access", secret: str = SECRET, **overrides) -> str:
        now = int(time.time())
        claims = {
            "sub": "7",
            "role": "NORMAL",
            "job": None,
            "nickname": "토핀",
            "profileImage": None,
            "birth": None,
            "type": token_type,
            "iat": now,
            "exp": now + 300,
            "iss": ISSUER,
            "aud": AUDIENCE,
        }
        claims.update(overrides)
        return jwt.encode(claims, secret, algorithm="HS256")

    return _make

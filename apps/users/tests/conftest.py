"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest

# Settings는 lru_cache로 캐시되므로 앱 모듈 import 전에 설정
os.environ.setdefault("USERS_JWT_SECRET_KEY", "test-secret-key-for-testing-only")
os.environ.setdefault("ENVIRONMENT", "test")


# ============================================================
# Mock Port Fixtures
# ============================================================


@pytest.fixture
def mock_user_gateway() -> MagicMock:
    """Mock CreateUserOutputPort + ReadUserOutputPort."""
    mock = MagicMock()
    mock.create = AsyncMock()
    mock.find_by_tofin_id = AsyncMock(return_value=None)
    mock.find_by_user_id = AsyncMock(return_value=None)
    mock.is_exists_by_tofin_id = AsyncMock(return_value=False)
    return mock


@pytest.fixture
def mock_normal_user_gateway() -> MagicMock:
    """Mock ReadNormalUserOutputPort + SaveUserDetailOutputPort."""
    mock = MagicMock()
    mock.find_by_user_id = AsyncMock(return_value=None)
    mock.exists_by_contact = AsyncMock(return_value=False)
    mock.save = AsyncMock(side_effect=lambda user: user)
    return mock


@pytest.fixture
def mock_asset_gateway() -> MagicMock:
    """Mock GetAssetsOutputPort."""
    from apps.users.application.asset.ports import GetAssetsOutputPort

    return create_autospec(GetAssetsOutputPort, instance=True)


@pytest.fixture
def mock_refresh_token_store() -> MagicMock:
    """Mock RefreshTokenOutputPort."""
    from apps.users.application.token.ports import RefreshTokenOutputPort

    return create_autospec(RefreshTokenOutputPort, instance=True)


@pytest.fixture
def mock_token_issuer() -> MagicMock:
    """Mock TokenIssuer."""
    from apps.users.application.token.ports import TokenInfo, TokenIssuer

    mock = create_autospec(TokenIssuer, instance=True)
    mock.generate_token.return_value = TokenInfo(
        access_token="access-token",
        refresh_token="refresh-token",
        access_expires_at=1_900_000_000,
        refresh_expires_at=1_900_100_000,
    )
    return mock


@pytest.fixture
def mock_user_info_encoder() -> MagicMock:
    """Mock UserInfoEncoder. 'hashed:' 접두사로 해시를 흉내냅니다."""
    mock = MagicMock()
    mock.hashed.side_effect = lambda raw: f"hashed:{raw}"
    mock.matches.side_effect = lambda raw, hashed: hashed == f"hashed:{raw}"
    return mock


@pytest.fixture
def mock_transaction_manager() -> AsyncMock:
    """Mock TransactionManager."""
    mock = AsyncMock()
    mock.commit = AsyncMock()
    mock.rollback = AsyncMock()
    return mock

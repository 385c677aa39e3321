"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, MagicMock, create_autospec

import pytest

# Settings는 lru_cache로 캐시되므로 앱 모듈 import 전에 설정
os.environ.setdefault("BOARDS_JWT_SECRET_KEY", "test-secret-key-for-testing-only")
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
def mock_board_command() -> MagicMock:
    """Mock BoardCommandGateway."""
    from apps.boards.application.board.ports import BoardCommandGateway

    mock = create_autospec(BoardCommandGateway, instance=True)
    mock.create.return_value = 10
    mock.update.return_value = 1
    mock.delete.return_value = 1
    return mock


@pytest.fixture
def mock_board_query() -> MagicMock:
    """Mock BoardQueryGateway."""
    from apps.boards.application.board.ports import BoardQueryGateway

    mock = create_autospec(BoardQueryGateway, instance=True)
    mock.find_detail.return_value = None
    mock.find_page.return_value = []
    mock.exists.return_value = True
    return mock


class InMemoryInteractionGateway:
    """좋아요/북마크 레코드를 메모리에 보관하는 테스트용 게이트웨이."""

    def __init__(self) -> None:
        self.records: set = set()

    async def add(self, interaction) -> None:
        self.records.add(interaction)

    async def remove(self, interaction) -> bool:
        if interaction in self.records:
            self.records.remove(interaction)
            return True
        return False


@pytest.fixture
def interaction_gateway() -> InMemoryInteractionGateway:
    return InMemoryInteractionGateway()


@pytest.fixture
def mock_transaction_manager() -> AsyncMock:
    """Mock TransactionManager."""
    mock = AsyncMock()
    mock.commit = AsyncMock()
    mock.rollback = AsyncMock()
    return mock

"""BoardInteractionService 단위 테스트."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from apps.boards.application.board.services import BoardInteractionService
from apps.boards.application.common.exceptions import NotFoundError
from apps.boards.domain.entities import BoardInteraction
from apps.boards.domain.enums import InteractionKind, InteractionStatus
from apps.boards.tests.unit.factories import create_user_info


@pytest.fixture
def service(
    mock_board_query: MagicMock,
    interaction_gateway,
    mock_transaction_manager: MagicMock,
) -> BoardInteractionService:
    return BoardInteractionService(
        board_query=mock_board_query,
        interactions=interaction_gateway,
        transaction_manager=mock_transaction_manager,
    )


class TestToggleLike:
    """좋아요 토글 테스트."""

    @pytest.mark.asyncio
    async def test_first_toggle_creates(
        self, service: BoardInteractionService, interaction_gateway
    ) -> None:
        status = await service.toggle_like(10, create_user_info())

        assert status is InteractionStatus.CREATED
        assert BoardInteraction(10, 1, InteractionKind.LIKE) in interaction_gateway.records

    @pytest.mark.asyncio
    async def test_second_toggle_cancels(
        self,
        service: BoardInteractionService,
        interaction_gateway,
        mock_transaction_manager: MagicMock,
    ) -> None:
        user = create_user_info()

        first = await service.toggle_like(10, user)
        second = await service.toggle_like(10, user)

        assert (first, second) == (InteractionStatus.CREATED, InteractionStatus.CANCELED)
        assert interaction_gateway.records == set()
        assert mock_transaction_manager.commit.await_count == 2

    @pytest.mark.asyncio
    async def test_users_are_independent(
        self, service: BoardInteractionService, interaction_gateway
    ) -> None:
        await service.toggle_like(10, create_user_info(user_id=1))
        status = await service.toggle_like(10, create_user_info(user_id=2))

        assert status is InteractionStatus.CREATED
        assert len(interaction_gateway.records) == 2

    @pytest.mark.asyncio
    async def test_missing_board(
        self,
        service: BoardInteractionService,
        mock_board_query: MagicMock,
        interaction_gateway,
        mock_transaction_manager: MagicMock,
    ) -> None:
        mock_board_query.exists.return_value = False

        with pytest.raises(NotFoundError, match="Board not found"):
            await service.toggle_like(404, create_user_info())

        assert interaction_gateway.records == set()
        mock_transaction_manager.commit.assert_not_awaited()


class TestToggleBookmark:
    @pytest.mark.asyncio
    async def test_like_and_bookmark_are_separate(
        self, service: BoardInteractionService, interaction_gateway
    ) -> None:
        user = create_user_info()

        await service.toggle_like(10, user)
        status = await service.toggle_bookmark(10, user)

        assert status is InteractionStatus.CREATED
        assert interaction_gateway.records == {
            BoardInteraction(10, 1, InteractionKind.LIKE),
            BoardInteraction(10, 1, InteractionKind.BOOKMARK),
        }

    @pytest.mark.asyncio
    async def test_toggle_twice_restores(
        self, service: BoardInteractionService, interaction_gateway
    ) -> None:
        user = create_user_info()

        await service.toggle_bookmark(10, user)
        status = await service.toggle_bookmark(10, user)

        assert status is InteractionStatus.CANCELED
        assert interaction_gateway.records == set()

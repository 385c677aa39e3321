"""Board Interaction Service.

좋아요/북마크 토글. 레코드가 있으면 지우고(CANCELED), 없으면 만듭니다(CREATED).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.boards.application.board.usecases import ToggleBookmarkUseCase, ToggleLikeUseCase
from apps.boards.application.common.exceptions import NotFoundError
from apps.boards.domain.entities import BoardInteraction
from apps.boards.domain.enums import InteractionKind, InteractionStatus

if TYPE_CHECKING:
    from apps.boards.application.board.ports import BoardInteractionGateway, BoardQueryGateway
    from apps.boards.application.common.ports import TransactionManager
    from apps.boards.domain.value_objects import UserInfo

logger = logging.getLogger(__name__)

BOARD_NOT_FOUND = "Board not found"


class BoardInteractionService(ToggleLikeUseCase, ToggleBookmarkUseCase):
    def __init__(
        self,
        *,
        board_query: "BoardQueryGateway",
        interactions: "BoardInteractionGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._board_query = board_query
        self._interactions = interactions
        self._tx = transaction_manager

    async def toggle_like(self, board_id: int, user: "UserInfo") -> InteractionStatus:
        return await self._toggle(board_id, user, InteractionKind.LIKE)

    async def toggle_bookmark(self, board_id: int, user: "UserInfo") -> InteractionStatus:
        return await self._toggle(board_id, user, InteractionKind.BOOKMARK)

    async def _toggle(
        self, board_id: int, user: "UserInfo", kind: InteractionKind
    ) -> InteractionStatus:
        if not await self._board_query.exists(board_id):
            raise NotFoundError(BOARD_NOT_FOUND)

        interaction = BoardInteraction(board_id=board_id, user_id=user.user_id, kind=kind)
        # 동시 토글은 직렬화하지 않음. 복합 PK와 ON CONFLICT DO NOTHING으로 행은 최대 하나
        if await self._interactions.remove(interaction):
            status = InteractionStatus.CANCELED
        else:
            await self._interactions.add(interaction)
            status = InteractionStatus.CREATED
        await self._tx.commit()

        logger.info(
            "Board interaction toggled",
            extra={
                "board_id": board_id,
                "user_id": user.user_id,
                "kind": kind.value,
                "status": status.value,
            },
        )
        return status

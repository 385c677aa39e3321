"""SQLAlchemy implementation of board interaction gateway."""

from __future__ import annotations

from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from apps.boards.domain.entities import BoardInteraction
from apps.boards.domain.enums import InteractionKind
from apps.boards.infrastructure.persistence_postgres.models import (
    BoardBookmarkModel,
    BoardLikeModel,
)

_MODELS: dict[InteractionKind, type[BoardLikeModel] | type[BoardBookmarkModel]] = {
    InteractionKind.LIKE: BoardLikeModel,
    InteractionKind.BOOKMARK: BoardBookmarkModel,
}


class SqlaBoardInteractionGateway:
    """BoardInteractionGateway 구현체.

    kind에 따라 board_likes 또는 board_bookmarks 테이블을 사용합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, interaction: BoardInteraction) -> None:
        model = _MODELS[interaction.kind]
        stmt = (
            pg_insert(model)
            .values(board_id=interaction.board_id, user_id=interaction.user_id)
            .on_conflict_do_nothing(index_elements=["board_id", "user_id"])
        )
        await self._session.execute(stmt)

    async def remove(self, interaction: BoardInteraction) -> bool:
        model = _MODELS[interaction.kind]
        stmt = delete(model).where(
            model.board_id == interaction.board_id,
            model.user_id == interaction.user_id,
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

"""SQLAlchemy implementation of board gateways."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, exists, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import noload

from apps.boards.application.board.dto import BoardAbstract, BoardDetail
from apps.boards.application.common.exceptions import InvalidCategoryError
from apps.boards.domain.entities import Board
from apps.boards.infrastructure.persistence_postgres.mappers import (
    board_entity_to_model,
    board_model_to_abstract,
    board_model_to_detail,
)
from apps.boards.infrastructure.persistence_postgres.models import (
    BoardBookmarkModel,
    BoardLikeModel,
    BoardModel,
)

logger = logging.getLogger(__name__)


def _count_of(model: type[BoardLikeModel] | type[BoardBookmarkModel]):
    """게시글별 레코드 수 상관 서브쿼리."""
    return (
        select(func.count())
        .select_from(model)
        .where(model.board_id == BoardModel.id)
        .correlate(BoardModel)
        .scalar_subquery()
    )


class SqlaBoardCommandGateway:
    """BoardCommandGateway 구현체."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, board: Board) -> int:
        """게시글과 태그를 한 번에 flush합니다.

        카테고리 FK 위반은 InvalidCategoryError로 변환합니다.
        """
        model = board_entity_to_model(board)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                "Board insert violated constraint",
                extra={"category_id": board.category_id},
            )
            raise InvalidCategoryError() from e
        board.id = model.id
        return model.id

    async def update(
        self,
        board_id: int,
        *,
        user_id: int,
        title: str | None,
        content: str | None,
    ) -> int:
        values: dict[str, Any] = {"updated_at": datetime.now(timezone.utc)}
        if title is not None:
            values["title"] = title
        if content is not None:
            values["content"] = content

        stmt = (
            update(BoardModel)
            .where(BoardModel.id == board_id, BoardModel.user_id == user_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def delete(self, board_id: int, *, user_id: int) -> int:
        # 태그/좋아요/북마크는 FK ON DELETE CASCADE
        stmt = (
            delete(BoardModel)
            .where(BoardModel.id == board_id, BoardModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount


class SqlaBoardQueryGateway:
    """BoardQueryGateway 구현체."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_detail(self, board_id: int) -> BoardDetail | None:
        stmt = select(
            BoardModel,
            _count_of(BoardLikeModel).label("like_count"),
            _count_of(BoardBookmarkModel).label("bookmark_count"),
        ).where(BoardModel.id == board_id)
        result = await self._session.execute(stmt)
        row = result.first()
        if row is None:
            return None

        model, like_count, bookmark_count = row
        return board_model_to_detail(
            model, like_count=like_count, bookmark_count=bookmark_count
        )

    async def find_page(
        self,
        *,
        offset: int,
        limit: int,
        category_id: int | None = None,
    ) -> list[BoardAbstract]:
        stmt = (
            select(
                BoardModel,
                _count_of(BoardLikeModel).label("like_count"),
                _count_of(BoardBookmarkModel).label("bookmark_count"),
            )
            .options(noload(BoardModel.product_tags))
            .order_by(BoardModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        if category_id is not None:
            stmt = stmt.where(BoardModel.category_id == category_id)

        result = await self._session.execute(stmt)
        return [
            board_model_to_abstract(model, like_count=likes, bookmark_count=bookmarks)
            for model, likes, bookmarks in result.all()
        ]

    async def exists(self, board_id: int) -> bool:
        stmt = select(exists().where(BoardModel.id == board_id))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

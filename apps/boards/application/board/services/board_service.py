"""Board Service.

게시글 작성/조회/수정/삭제 유스케이스 구현체입니다.
수정과 삭제는 작성자 본인의 게시글에만 적용되며, 영향받은 행 수를 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.boards.application.board.usecases import (
    DeleteBoardUseCase,
    GetBoardDetailUseCase,
    GetBoardsUseCase,
    ModifyBoardUseCase,
    RegisterBoardUseCase,
)
from apps.boards.application.common.exceptions import (
    BadRequestError,
    InvalidCategoryError,
    NotFoundError,
)
from apps.boards.domain.entities import Board
from apps.boards.domain.exceptions import InvalidValueError

if TYPE_CHECKING:
    from apps.boards.application.board.dto import (
        BoardAbstract,
        BoardDetail,
        ModifyBoardServiceRequest,
        RegisterBoardServiceRequest,
    )
    from apps.boards.application.board.ports import BoardCommandGateway, BoardQueryGateway
    from apps.boards.application.common.ports import TransactionManager
    from apps.boards.domain.value_objects import UserInfo

logger = logging.getLogger(__name__)

BOARD_NOT_FOUND = "Board not found"
PROPERTY_REQUIRED = "At least one property required"
MAX_PAGE_SIZE = 100


def _clean(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


class BoardService(
    RegisterBoardUseCase,
    GetBoardDetailUseCase,
    GetBoardsUseCase,
    ModifyBoardUseCase,
    DeleteBoardUseCase,
):
    def __init__(
        self,
        *,
        board_command: "BoardCommandGateway",
        board_query: "BoardQueryGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._board_command = board_command
        self._board_query = board_query
        self._tx = transaction_manager

    async def register_board(
        self, request: "RegisterBoardServiceRequest", user: "UserInfo"
    ) -> int:
        """게시글을 작성하고 ID를 반환합니다.

        Raises:
            BadRequestError: 제목/본문 오류, 존재하지 않는 카테고리
        """
        try:
            board = Board.write(
                title=request.title,
                content=request.content,
                category_id=request.category_id,
                author=user,
                product_ids=request.product_ids,
            )
        except InvalidValueError as e:
            raise BadRequestError(e.message) from e

        try:
            board_id = await self._board_command.create(board)
        except InvalidCategoryError:
            await self._tx.rollback()
            raise
        await self._tx.commit()

        logger.info(
            "Board registered",
            extra={"board_id": board_id, "user_id": user.user_id, "tags": len(board.product_ids)},
        )
        return board_id

    async def get_board_detail(self, board_id: int) -> "BoardDetail":
        detail = await self._board_query.find_detail(board_id)
        if detail is None:
            raise NotFoundError(BOARD_NOT_FOUND)
        return detail

    async def get_boards(
        self, page_no: int, size: int, category: int | None = None
    ) -> list["BoardAbstract"]:
        """최신순 페이지 조회. page_no는 0부터 시작합니다."""
        if page_no < 0:
            raise BadRequestError("pageNo must be greater than or equal to 0")
        if not 1 <= size <= MAX_PAGE_SIZE:
            raise BadRequestError(f"size must be between 1 and {MAX_PAGE_SIZE}")

        return await self._board_query.find_page(
            offset=page_no * size,
            limit=size,
            category_id=category,
        )

    async def modify_board(
        self, board_id: int, request: "ModifyBoardServiceRequest", user: "UserInfo"
    ) -> int:
        """제목/본문 중 값이 있는 항목만 수정합니다.

        Raises:
            BadRequestError: 제목과 본문이 모두 비어 있음
        """
        title = _clean(request.title)
        content = _clean(request.content)
        if title is None and content is None:
            raise BadRequestError(PROPERTY_REQUIRED)

        count = await self._board_command.update(
            board_id,
            user_id=user.user_id,
            title=title,
            content=content,
        )
        await self._tx.commit()

        logger.info(
            "Board modified",
            extra={"board_id": board_id, "user_id": user.user_id, "modified": count},
        )
        return count

    async def delete_board(self, board_id: int, user: "UserInfo") -> int:
        count = await self._board_command.delete(board_id, user_id=user.user_id)
        await self._tx.commit()

        logger.info(
            "Board deleted",
            extra={"board_id": board_id, "user_id": user.user_id, "deleted": count},
        )
        return count

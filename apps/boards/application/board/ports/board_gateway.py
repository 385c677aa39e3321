"""Board gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.boards.application.board.dto import BoardAbstract, BoardDetail
    from apps.boards.domain.entities import Board


class BoardCommandGateway(Protocol):
    """게시글 쓰기 포트."""

    async def create(self, board: Board) -> int:
        """게시글과 상품 태그를 저장하고 ID를 반환합니다.

        Raises:
            InvalidCategoryError: 카테고리가 존재하지 않음
        """
        ...

    async def update(
        self,
        board_id: int,
        *,
        user_id: int,
        title: str | None,
        content: str | None,
    ) -> int:
        """작성자 본인의 게시글만 수정합니다. 수정된 행 수를 반환합니다."""
        ...

    async def delete(self, board_id: int, *, user_id: int) -> int:
        """작성자 본인의 게시글만 삭제합니다. 삭제된 행 수를 반환합니다."""
        ...


class BoardQueryGateway(Protocol):
    """게시글 조회 포트."""

    async def find_detail(self, board_id: int) -> BoardDetail | None:
        ...

    async def find_page(
        self,
        *,
        offset: int,
        limit: int,
        category_id: int | None = None,
    ) -> list[BoardAbstract]:
        """최신순 목록."""
        ...

    async def exists(self, board_id: int) -> bool:
        ...

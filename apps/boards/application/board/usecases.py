"""Board use cases (input ports)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.boards.application.board.dto import (
        BoardAbstract,
        BoardDetail,
        ModifyBoardServiceRequest,
        RegisterBoardServiceRequest,
    )
    from apps.boards.domain.enums import InteractionStatus
    from apps.boards.domain.value_objects import UserInfo


class RegisterBoardUseCase(Protocol):
    async def register_board(self, request: RegisterBoardServiceRequest, user: UserInfo) -> int: ...


class GetBoardDetailUseCase(Protocol):
    async def get_board_detail(self, board_id: int) -> BoardDetail: ...


class GetBoardsUseCase(Protocol):
    async def get_boards(
        self, page_no: int, size: int, category: int | None = None
    ) -> list[BoardAbstract]: ...


class ModifyBoardUseCase(Protocol):
    async def modify_board(
        self, board_id: int, request: ModifyBoardServiceRequest, user: UserInfo
    ) -> int: ...


class DeleteBoardUseCase(Protocol):
    async def delete_board(self, board_id: int, user: UserInfo) -> int: ...


class ToggleLikeUseCase(Protocol):
    async def toggle_like(self, board_id: int, user: UserInfo) -> InteractionStatus: ...


class ToggleBookmarkUseCase(Protocol):
    async def toggle_bookmark(self, board_id: int, user: UserInfo) -> InteractionStatus: ...

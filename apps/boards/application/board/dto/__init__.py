"""Board DTOs."""

from apps.boards.application.board.dto.board import (
    BoardAbstract,
    BoardDetail,
    ModifyBoardServiceRequest,
    RegisterBoardServiceRequest,
)

__all__ = [
    "BoardAbstract",
    "BoardDetail",
    "ModifyBoardServiceRequest",
    "RegisterBoardServiceRequest",
]

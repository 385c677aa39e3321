"""HTTP schemas."""

from apps.boards.presentation.http.schemas.board import (
    BIGINT_MAX,
    INT_MAX,
    AuthorResponse,
    BoardAbstractResponse,
    BoardDetailResponse,
    ModifyBoardRequest,
    RegisterBoardRequest,
)

__all__ = [
    "BIGINT_MAX",
    "INT_MAX",
    "AuthorResponse",
    "BoardAbstractResponse",
    "BoardDetailResponse",
    "ModifyBoardRequest",
    "RegisterBoardRequest",
]

"""Board controller - 게시글 CRUD 및 좋아요/북마크."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import JSONResponse

from apps._shared.responses import GlobalResponse
from apps._shared.security import TokenableUser
from apps.boards.application.board.services import BoardInteractionService, BoardService
from apps.boards.domain.enums import InteractionStatus
from apps.boards.domain.value_objects import UserInfo
from apps.boards.presentation.http.schemas import (
    BIGINT_MAX,
    INT_MAX,
    BoardAbstractResponse,
    BoardDetailResponse,
    ModifyBoardRequest,
    RegisterBoardRequest,
)
from apps.boards.setup.dependencies import (
    CurrentUser,
    get_board_interaction_service,
    get_board_service,
)

router = APIRouter(prefix="/boards", tags=["boards"])

BoardIdPath = Annotated[int, Path(le=BIGINT_MAX)]


def _user_info(user: TokenableUser) -> UserInfo:
    return UserInfo(
        user_id=user.id,
        nickname=user.nickname,
        profile_image=user.profile_image,
        job=user.job,
    )


def _created(data: dict) -> JSONResponse:
    body = GlobalResponse.created("created", data)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())


def _toggled(result: InteractionStatus) -> JSONResponse:
    data = {"modifiedStatus": result.value}
    if result is InteractionStatus.CREATED:
        return _created(data)
    return JSONResponse(content=GlobalResponse.success("deleted", data).model_dump())


@router.post("", status_code=status.HTTP_201_CREATED)
async def register_board(
    request: RegisterBoardRequest,
    user: CurrentUser,
    service: BoardService = Depends(get_board_service),
) -> JSONResponse:
    """게시글을 작성합니다."""
    board_id = await service.register_board(request.to_service_request(), _user_info(user))
    return _created({"boardId": board_id})


@router.get("")
async def get_boards(
    page_no: int = Query(0, alias="pageNo", ge=0, le=INT_MAX),
    size: int = Query(10, ge=1, le=100),
    category: int | None = Query(None, ge=1, le=INT_MAX),
    service: BoardService = Depends(get_board_service),
) -> GlobalResponse:
    """최신순 게시글 목록."""
    boards = await service.get_boards(page_no, size, category)
    return GlobalResponse.success(
        "success",
        {
            "boards": [
                BoardAbstractResponse.of(board).model_dump(by_alias=True, mode="json")
                for board in boards
            ]
        },
    )


@router.get("/{board_id}")
async def get_board_detail(
    board_id: BoardIdPath,
    service: BoardService = Depends(get_board_service),
) -> GlobalResponse:
    detail = await service.get_board_detail(board_id)
    return GlobalResponse.success(
        "success",
        {"board": BoardDetailResponse.of(detail).model_dump(by_alias=True, mode="json")},
    )


@router.put("/{board_id}")
async def modify_board(
    board_id: BoardIdPath,
    request: ModifyBoardRequest,
    user: CurrentUser,
    service: BoardService = Depends(get_board_service),
) -> GlobalResponse:
    """본인 게시글의 제목/본문을 수정합니다."""
    modified = await service.modify_board(
        board_id, request.to_service_request(), _user_info(user)
    )
    return GlobalResponse.success("success", {"modified": modified})


@router.delete("/{board_id}")
async def delete_board(
    board_id: BoardIdPath,
    user: CurrentUser,
    service: BoardService = Depends(get_board_service),
) -> GlobalResponse:
    deleted = await service.delete_board(board_id, _user_info(user))
    return GlobalResponse.success("success", {"deleted": deleted})


@router.post("/{board_id}/like")
async def toggle_like(
    board_id: BoardIdPath,
    user: CurrentUser,
    service: BoardInteractionService = Depends(get_board_interaction_service),
) -> JSONResponse:
    """좋아요 토글. 새로 누르면 201, 취소하면 200."""
    return _toggled(await service.toggle_like(board_id, _user_info(user)))


@router.post("/{board_id}/bookmark")
async def toggle_bookmark(
    board_id: BoardIdPath,
    user: CurrentUser,
    service: BoardInteractionService = Depends(get_board_interaction_service),
) -> JSONResponse:
    """북마크 토글. 새로 누르면 201, 취소하면 200."""
    return _toggled(await service.toggle_bookmark(board_id, _user_info(user)))

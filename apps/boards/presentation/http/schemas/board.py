"""Board HTTP schemas.

요청/응답 본문은 camelCase 필드명을 사용합니다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.boards.application.board.dto import (
    BoardAbstract,
    BoardDetail,
    ModifyBoardServiceRequest,
    RegisterBoardServiceRequest,
)
from apps.boards.domain.value_objects import UserInfo


# 컬럼 타입 범위 (INTEGER, BIGINT)
INT_MAX = 2**31 - 1
BIGINT_MAX = 2**63 - 1

ProductId = Annotated[int, Field(ge=1, le=BIGINT_MAX)]


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class RegisterBoardRequest(CamelModel):
    """게시글 작성 요청 스키마."""

    title: str = Field(..., description="제목 (최대 100자)")
    content: str = Field(..., description="본문")
    category_id: int = Field(..., ge=1, le=INT_MAX, description="카테고리 ID")
    product_ids: list[ProductId] = Field(default_factory=list, description="태그할 상품 ID")

    def to_service_request(self) -> RegisterBoardServiceRequest:
        return RegisterBoardServiceRequest(
            title=self.title,
            content=self.content,
            category_id=self.category_id,
            product_ids=list(self.product_ids),
        )


class ModifyBoardRequest(CamelModel):
    """게시글 수정 요청 스키마. 비어 있는 필드는 변경하지 않습니다."""

    title: str | None = None
    content: str | None = None

    def to_service_request(self) -> ModifyBoardServiceRequest:
        return ModifyBoardServiceRequest(title=self.title, content=self.content)


class AuthorResponse(CamelModel):
    user_id: int
    nickname: str
    profile_image: str | None = None
    job: str | None = None

    @classmethod
    def of(cls, author: UserInfo) -> "AuthorResponse":
        return cls(
            user_id=author.user_id,
            nickname=author.nickname,
            profile_image=author.profile_image,
            job=author.job,
        )


class BoardAbstractResponse(CamelModel):
    board_id: int
    title: str
    category_id: int
    category_name: str | None = None
    author: AuthorResponse
    like_count: int
    bookmark_count: int
    created_at: datetime

    @classmethod
    def of(cls, board: BoardAbstract) -> "BoardAbstractResponse":
        return cls(
            board_id=board.board_id,
            title=board.title,
            category_id=board.category_id,
            category_name=board.category_name,
            author=AuthorResponse.of(board.author),
            like_count=board.like_count,
            bookmark_count=board.bookmark_count,
            created_at=board.created_at,
        )


class BoardDetailResponse(CamelModel):
    board_id: int
    title: str
    content: str
    category_id: int
    category_name: str | None = None
    author: AuthorResponse
    like_count: int
    bookmark_count: int
    product_ids: list[int]
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def of(cls, board: BoardDetail) -> "BoardDetailResponse":
        return cls(
            board_id=board.board_id,
            title=board.title,
            content=board.content,
            category_id=board.category_id,
            category_name=board.category_name,
            author=AuthorResponse.of(board.author),
            like_count=board.like_count,
            bookmark_count=board.bookmark_count,
            product_ids=list(board.product_ids),
            created_at=board.created_at,
            updated_at=board.updated_at,
        )

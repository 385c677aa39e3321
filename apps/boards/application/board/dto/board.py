"""Board service DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.boards.domain.value_objects import UserInfo


@dataclass(frozen=True)
class RegisterBoardServiceRequest:
    title: str
    content: str
    category_id: int
    product_ids: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class ModifyBoardServiceRequest:
    """수정 요청. None이거나 공백인 필드는 변경하지 않습니다."""

    title: str | None = None
    content: str | None = None


@dataclass(frozen=True)
class BoardAbstract:
    """게시글 목록 항목."""

    board_id: int
    title: str
    category_id: int
    category_name: str | None
    author: UserInfo
    like_count: int
    bookmark_count: int
    created_at: datetime


@dataclass(frozen=True)
class BoardDetail:
    """게시글 상세."""

    board_id: int
    title: str
    content: str
    category_id: int
    category_name: str | None
    author: UserInfo
    like_count: int
    bookmark_count: int
    product_ids: list[int]
    created_at: datetime
    updated_at: datetime | None = None

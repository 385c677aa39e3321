"""Board aggregate.

ORM과 분리된 순수 도메인 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.boards.domain.enums import InteractionKind
from apps.boards.domain.exceptions import InvalidValueError
from apps.boards.domain.value_objects import UserInfo

MAX_TITLE_LENGTH = 100


@dataclass(frozen=True, slots=True)
class BoardProductTagPK:
    """게시글-상품 태그 복합 키."""

    board_id: int
    product_id: int


@dataclass(frozen=True, slots=True)
class BoardInteraction:
    """좋아요/북마크 레코드. (board_id, user_id, kind)가 곧 식별자입니다."""

    board_id: int
    user_id: int
    kind: InteractionKind


@dataclass(kw_only=True)
class Board:
    """게시글 엔티티.

    Attributes:
        id: 게시글 ID (저장 전에는 None)
        title: 제목
        content: 본문
        category_id: 카테고리 ID (존재 여부는 저장소에서 검증)
        author: 작성자 스냅샷
        product_ids: 태그된 상품 ID (중복 없음, 입력 순서 유지)
    """

    title: str
    content: str
    category_id: int
    author: UserInfo
    product_ids: list[int] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def write(
        cls,
        *,
        title: str,
        content: str,
        category_id: int,
        author: UserInfo,
        product_ids: list[int] | None = None,
    ) -> "Board":
        """새 게시글을 작성합니다.

        Raises:
            InvalidValueError: 제목/본문이 비었거나 제목이 너무 긴 경우
        """
        title = (title or "").strip()
        content = (content or "").strip()
        if not title:
            raise InvalidValueError("Title is required")
        if len(title) > MAX_TITLE_LENGTH:
            raise InvalidValueError(f"Title must be at most {MAX_TITLE_LENGTH} characters")
        if not content:
            raise InvalidValueError("Content is required")

        return cls(
            title=title,
            content=content,
            category_id=category_id,
            author=author,
            product_ids=list(dict.fromkeys(product_ids or [])),
        )

    @property
    def tags(self) -> list[BoardProductTagPK]:
        if self.id is None:
            return []
        return [BoardProductTagPK(self.id, product_id) for product_id in self.product_ids]

"""Test Factories.

테스트용 객체 생성 팩토리.
"""

from __future__ import annotations

from datetime import datetime, timezone

from apps.boards.application.board.dto import BoardAbstract, BoardDetail
from apps.boards.domain.value_objects import UserInfo

CREATED_AT = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def create_user_info(
    *,
    user_id: int = 1,
    nickname: str = "토핀",
    profile_image: str | None = None,
    job: str | None = "STUDENT",
) -> UserInfo:
    """테스트용 작성자 정보 생성."""
    return UserInfo(
        user_id=user_id,
        nickname=nickname,
        profile_image=profile_image,
        job=job,
    )


def create_board_detail(
    *,
    board_id: int = 10,
    title: str = "첫 글",
    content: str = "본문입니다",
    product_ids: list[int] | None = None,
    like_count: int = 0,
    bookmark_count: int = 0,
) -> BoardDetail:
    return BoardDetail(
        board_id=board_id,
        title=title,
        content=content,
        category_id=1,
        category_name="free",
        author=create_user_info(),
        like_count=like_count,
        bookmark_count=bookmark_count,
        product_ids=product_ids if product_ids is not None else [3, 5],
        created_at=CREATED_AT,
    )


def create_board_abstract(*, board_id: int = 10, title: str = "첫 글") -> BoardAbstract:
    return BoardAbstract(
        board_id=board_id,
        title=title,
        category_id=1,
        category_name="free",
        author=create_user_info(),
        like_count=2,
        bookmark_count=1,
        created_at=CREATED_AT,
    )

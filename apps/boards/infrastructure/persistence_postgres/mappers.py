"""ORM to DTO Mappers."""

from apps.boards.application.board.dto import BoardAbstract, BoardDetail
from apps.boards.domain.entities import Board
from apps.boards.domain.value_objects import UserInfo
from apps.boards.infrastructure.persistence_postgres.models import (
    BoardModel,
    BoardProductTagModel,
)


def _author(model: BoardModel) -> UserInfo:
    return UserInfo(
        user_id=model.user_id,
        nickname=model.nickname,
        profile_image=model.profile_image,
        job=model.job,
    )


def board_entity_to_model(board: Board) -> BoardModel:
    """신규 Board 엔티티를 BoardModel로 변환합니다 (태그 포함)."""
    return BoardModel(
        title=board.title,
        content=board.content,
        category_id=board.category_id,
        user_id=board.author.user_id,
        nickname=board.author.nickname,
        profile_image=board.author.profile_image,
        job=board.author.job,
        product_tags=[BoardProductTagModel(product_id=pid) for pid in board.product_ids],
    )


def board_model_to_detail(
    model: BoardModel, *, like_count: int, bookmark_count: int
) -> BoardDetail:
    return BoardDetail(
        board_id=model.id,
        title=model.title,
        content=model.content,
        category_id=model.category_id,
        category_name=model.category.name if model.category else None,
        author=_author(model),
        like_count=like_count,
        bookmark_count=bookmark_count,
        product_ids=[tag.product_id for tag in model.product_tags],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def board_model_to_abstract(
    model: BoardModel, *, like_count: int, bookmark_count: int
) -> BoardAbstract:
    return BoardAbstract(
        board_id=model.id,
        title=model.title,
        category_id=model.category_id,
        category_name=model.category.name if model.category else None,
        author=_author(model),
        like_count=like_count,
        bookmark_count=bookmark_count,
        created_at=model.created_at,
    )

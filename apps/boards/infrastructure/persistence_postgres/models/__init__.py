"""ORM Models."""

from apps.boards.infrastructure.persistence_postgres.models.board import (
    BoardBookmarkModel,
    BoardCategoryModel,
    BoardLikeModel,
    BoardModel,
    BoardProductTagModel,
)

__all__ = [
    "BoardCategoryModel",
    "BoardModel",
    "BoardProductTagModel",
    "BoardLikeModel",
    "BoardBookmarkModel",
]

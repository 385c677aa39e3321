"""Board ORM Models.

게시글과 태그/좋아요/북마크 테이블. 자식 테이블은 게시글 삭제 시 DB에서 함께 삭제됩니다.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from apps.boards.infrastructure.persistence_postgres.base import Base
from apps.boards.infrastructure.persistence_postgres.constants import (
    BOARD_BOOKMARKS_TABLE,
    BOARD_CATEGORIES_TABLE,
    BOARD_LIKES_TABLE,
    BOARD_PRODUCT_TAGS_TABLE,
    BOARDS_SCHEMA,
    BOARDS_TABLE,
)

BOARD_ID_FK = f"{BOARDS_SCHEMA}.{BOARDS_TABLE}.id"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BoardCategoryModel(Base):
    """게시글 카테고리 (seed 데이터)."""

    __tablename__ = BOARD_CATEGORIES_TABLE

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)


class BoardModel(Base):
    """게시글 ORM 모델.

    nickname/profile_image/job은 작성 시점의 토큰 클레임 스냅샷입니다.
    """

    __tablename__ = BOARDS_TABLE

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey(f"{BOARDS_SCHEMA}.{BOARD_CATEGORIES_TABLE}.id"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    nickname: Mapped[str] = mapped_column(String(20), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(500))
    job: Mapped[str | None] = mapped_column(String(32))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    category: Mapped[BoardCategoryModel] = relationship(lazy="joined")
    product_tags: Mapped[list[BoardProductTagModel]] = relationship(
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BoardProductTagModel.product_id",
    )


class BoardProductTagModel(Base):
    """게시글-상품 태그. (board_id, product_id) 복합 PK."""

    __tablename__ = BOARD_PRODUCT_TAGS_TABLE

    board_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey(BOARD_ID_FK, ondelete="CASCADE"),
        primary_key=True,
    )
    product_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)


class BoardLikeModel(Base):
    """좋아요. (board_id, user_id) 복합 PK."""

    __tablename__ = BOARD_LIKES_TABLE

    board_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey(BOARD_ID_FK, ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )


class BoardBookmarkModel(Base):
    """북마크. (board_id, user_id) 복합 PK."""

    __tablename__ = BOARD_BOOKMARKS_TABLE

    board_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey(BOARD_ID_FK, ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

"""User ORM Models.

users.users 와 users.normal_user_details 테이블에 매핑됩니다.
세부 정보는 users.id를 PK/FK로 공유하는 1:1 관계입니다.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import BigInteger, Boolean, Date, DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from apps.users.infrastructure.persistence_postgres.base import Base
from apps.users.infrastructure.persistence_postgres.constants import (
    NORMAL_USER_DETAILS_TABLE,
    USERS_SCHEMA,
    USERS_TABLE,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserModel(Base):
    """사용자 ORM 모델."""

    __tablename__ = USERS_TABLE

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    tofin_id: Mapped[str] = mapped_column(String(30), unique=True, nullable=False)
    user_info: Mapped[str] = mapped_column(String(255), nullable=False)
    birth: Mapped[date] = mapped_column(Date, nullable=False)
    job: Mapped[str | None] = mapped_column(String(32))
    nickname: Mapped[str] = mapped_column(String(20), nullable=False)
    profile_image: Mapped[str | None] = mapped_column(String(500))
    role: Mapped[str] = mapped_column(String(16), nullable=False)
    # flush 후 재조회 없이 읽을 수 있도록 클라이언트에서 채움
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    detail: Mapped[NormalUserDetailModel | None] = relationship(
        back_populates="user",
        uselist=False,
        lazy="joined",
        cascade="all, delete-orphan",
    )


class NormalUserDetailModel(Base):
    """일반 사용자 세부 정보 ORM 모델."""

    __tablename__ = NORMAL_USER_DETAILS_TABLE

    user_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey(f"{USERS_SCHEMA}.{USERS_TABLE}.id", ondelete="CASCADE"),
        primary_key=True,
    )
    contact: Mapped[str | None] = mapped_column(String(11), unique=True)
    back_social_id: Mapped[str | None] = mapped_column(String(64))
    social_name: Mapped[str | None] = mapped_column(String(64))
    public_amount: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    public_percent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user: Mapped[UserModel] = relationship(back_populates="detail", lazy="noload")

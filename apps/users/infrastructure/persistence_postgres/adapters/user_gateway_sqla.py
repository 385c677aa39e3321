"""SQLAlchemy implementation of user gateways."""

from __future__ import annotations

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.users.application.common.exceptions import ConflictError
from apps.users.domain.entities.user import User
from apps.users.domain.value_objects import TofinId, UserId
from apps.users.infrastructure.persistence_postgres.mappers import (
    user_entity_to_model,
    user_model_to_entity,
)
from apps.users.infrastructure.persistence_postgres.models import UserModel

logger = logging.getLogger(__name__)

DUPLICATE_TOFIN_ID = "해당 아이디는 이미 존재합니다."


class SqlaUserGateway:
    """사용자 생성/조회 게이트웨이 SQLAlchemy 구현.

    CreateUserOutputPort, ReadUserOutputPort 구현체.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> User:
        """새 사용자를 생성합니다.

        동시 가입으로 아이디 유니크 제약을 위반하면 ConflictError로 변환합니다.
        """
        model = user_entity_to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning("User insert violated constraint", extra={"tofin_id": str(user.tofin_id)})
            raise ConflictError(DUPLICATE_TOFIN_ID) from e
        return user_model_to_entity(model)

    async def find_by_tofin_id(self, tofin_id: TofinId) -> User | None:
        """로그인 아이디로 조회합니다."""
        stmt = select(UserModel).where(UserModel.tofin_id == tofin_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return user_model_to_entity(model) if model else None

    async def find_by_user_id(self, user_id: UserId) -> User | None:
        """사용자 ID로 조회합니다."""
        model = await self._session.get(UserModel, user_id.to_int())
        return user_model_to_entity(model) if model else None

    async def is_exists_by_tofin_id(self, tofin_id: TofinId) -> bool:
        """로그인 아이디 사용 여부를 확인합니다."""
        stmt = select(exists().where(UserModel.tofin_id == tofin_id.value))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

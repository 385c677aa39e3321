"""SQLAlchemy implementation of normal user detail gateways."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.users.application.common.exceptions import BadRequestError
from apps.users.domain.entities.user import NormalUser
from apps.users.domain.value_objects import Contact, UserId
from apps.users.infrastructure.persistence_postgres.mappers import (
    apply_detail,
    user_model_to_entity,
)
from apps.users.infrastructure.persistence_postgres.models import (
    NormalUserDetailModel,
    UserModel,
)

DUPLICATE_CONTACT = "해당 전화번호는 이미 사용 중 입니다."


class SqlaNormalUserGateway:
    """일반 사용자 세부 정보 게이트웨이 SQLAlchemy 구현.

    ReadNormalUserOutputPort, SaveUserDetailOutputPort 구현체.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: UserId) -> NormalUser | None:
        """세부 정보가 있는 사용자만 반환합니다."""
        model = await self._session.get(UserModel, user_id.to_int())
        if model is None or model.detail is None:
            return None
        return NormalUser.from_user(user_model_to_entity(model))

    async def exists_by_contact(
        self,
        contact: Contact,
        *,
        exclude_user_id: UserId | None = None,
    ) -> bool:
        """전화번호가 이미 연결되어 있는지 확인합니다."""
        condition = NormalUserDetailModel.contact == contact.value
        if exclude_user_id is not None:
            condition = condition & (NormalUserDetailModel.user_id != exclude_user_id.to_int())

        result = await self._session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def save(self, user: NormalUser) -> NormalUser:
        """세부 정보를 저장합니다. 행이 없으면 생성합니다."""
        detail = await self._session.get(NormalUserDetailModel, user.id.to_int())
        if detail is None:
            detail = NormalUserDetailModel(user_id=user.id.to_int())
            self._session.add(detail)

        apply_detail(detail, user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # contact 유니크 제약 (동시 연결)
            raise BadRequestError(DUPLICATE_CONTACT) from e
        return user

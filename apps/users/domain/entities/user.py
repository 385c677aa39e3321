"""User aggregate.

ORM과 분리된 순수 도메인 엔티티입니다.
SQLAlchemy 모델과의 변환은 infrastructure/persistence_postgres/mappers.py에서 처리합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from apps.users.domain.enums import Job, UserRole
from apps.users.domain.exceptions.user import AssetNotConnectedError
from apps.users.domain.value_objects import (
    Birth,
    Contact,
    ImageUrl,
    Nickname,
    TofinId,
    UserId,
)


@dataclass(kw_only=True)
class User:
    """사용자 엔티티.

    Attributes:
        id: 사용자 식별자 (저장 전에는 None)
        tofin_id: 로그인 아이디 (전역 유일)
        user_info: 해시된 비밀번호. 평문은 저장하지 않습니다.
        birth: 생년월일
        nickname: 닉네임
        profile_image: 프로필 이미지 URL
        job: 직업 (선택)
        role: 사용자 권한
        created_at: 생성 시각
    """

    tofin_id: TofinId
    user_info: str
    birth: Birth
    nickname: Nickname
    profile_image: ImageUrl = field(default_factory=ImageUrl)
    job: Job | None = None
    role: UserRole = UserRole.NORMAL
    id: UserId | None = None
    created_at: datetime | None = None

    def __repr__(self) -> str:
        # user_info는 해시값이라도 노출하지 않음
        return f"{type(self).__name__}(id={self.id}, tofin_id={self.tofin_id})"


@dataclass(kw_only=True, repr=False)
class NormalUser(User):
    """일반 사용자.

    자산 연결 정보(contact, back_social_id, social_name)와 공개 옵션을 가집니다.
    공개 옵션은 자산 연결 이후에만 변경할 수 있습니다.
    """

    contact: Contact | None = None
    back_social_id: str | None = None
    social_name: str | None = None
    public_amount: bool = False
    public_percent: bool = False

    @classmethod
    def from_user(cls, user: User) -> "NormalUser":
        """User를 NormalUser로 변환합니다. 이미 NormalUser면 그대로 반환합니다."""
        if isinstance(user, NormalUser):
            return user
        return cls(
            id=user.id,
            tofin_id=user.tofin_id,
            user_info=user.user_info,
            birth=user.birth,
            nickname=user.nickname,
            profile_image=user.profile_image,
            job=user.job,
            role=user.role,
            created_at=user.created_at,
        )

    @property
    def is_asset_connected(self) -> bool:
        return self.back_social_id is not None

    def connect_assets(self, *, contact: Contact, back_social_id: str, social_name: str) -> None:
        """외부 자산 제공자 연결 정보를 설정합니다."""
        self.contact = contact
        self.back_social_id = back_social_id
        self.social_name = social_name

    def set_public_option(self, *, public_amount: bool, public_percent: bool) -> None:
        """자산 공개 옵션을 변경합니다.

        Raises:
            AssetNotConnectedError: 자산 연결 전
        """
        if not self.is_asset_connected:
            raise AssetNotConnectedError()
        self.public_amount = public_amount
        self.public_percent = public_percent

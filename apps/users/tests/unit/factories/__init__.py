"""Test Factories.

테스트용 객체 생성 팩토리.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from apps.users.domain.entities.user import NormalUser, User
from apps.users.domain.enums import Job, UserRole
from apps.users.domain.value_objects import (
    Birth,
    Contact,
    ImageUrl,
    Nickname,
    TofinId,
    UserId,
)


def create_user(
    *,
    user_id: int | None = 1,
    tofin_id: str = "tofinuser01",
    user_info: str = "hashed:password123",
    nickname: str = "토핀",
    job: Job | None = Job.STUDENT,
) -> User:
    """테스트용 User 생성."""
    return User(
        id=UserId(user_id) if user_id is not None else None,
        tofin_id=TofinId(tofin_id),
        user_info=user_info,
        birth=Birth(date(1998, 3, 14)),
        nickname=Nickname(nickname),
        profile_image=ImageUrl("https://cdn.example.com/profile.png"),
        job=job,
        role=UserRole.NORMAL,
        created_at=datetime.now(timezone.utc),
    )


def create_normal_user(
    *,
    user_id: int | None = 1,
    tofin_id: str = "tofinuser01",
    user_info: str = "hashed:password123",
    contact: str | None = None,
    back_social_id: str | None = None,
    social_name: str | None = None,
    public_amount: bool = False,
    public_percent: bool = False,
) -> NormalUser:
    """테스트용 NormalUser 생성. contact를 주면 자산 연결된 상태로 만듭니다."""
    user = NormalUser.from_user(create_user(user_id=user_id, tofin_id=tofin_id, user_info=user_info))
    if contact is not None:
        user.connect_assets(
            contact=Contact(contact),
            back_social_id=back_social_id or "1234567",
            social_name=social_name or "홍길동",
        )
    user.public_amount = public_amount
    user.public_percent = public_percent
    return user

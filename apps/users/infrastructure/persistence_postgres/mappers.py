"""ORM to Domain Mappers."""

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
from apps.users.infrastructure.persistence_postgres.models import (
    NormalUserDetailModel,
    UserModel,
)


def user_model_to_entity(model: UserModel) -> User:
    """UserModel을 User 엔티티로 변환합니다.

    세부 정보 행이 있으면 NormalUser를 반환합니다.
    """
    common = dict(
        id=UserId(model.id),
        tofin_id=TofinId(model.tofin_id),
        user_info=model.user_info,
        birth=Birth(model.birth),
        nickname=Nickname(model.nickname),
        profile_image=ImageUrl(model.profile_image),
        job=Job(model.job) if model.job else None,
        role=UserRole(model.role),
        created_at=model.created_at,
    )

    detail = model.detail
    if detail is None:
        return User(**common)

    return NormalUser(
        **common,
        contact=Contact(detail.contact) if detail.contact else None,
        back_social_id=detail.back_social_id,
        social_name=detail.social_name,
        public_amount=detail.public_amount,
        public_percent=detail.public_percent,
    )


def user_entity_to_model(user: User) -> UserModel:
    """신규 User 엔티티를 UserModel로 변환합니다."""
    model = UserModel(
        tofin_id=user.tofin_id.value,
        user_info=user.user_info,
        birth=user.birth.to_date(),
        nickname=user.nickname.value,
        profile_image=user.profile_image.value,
        job=user.job.value if user.job else None,
        role=user.role.value,
    )
    if user.created_at is not None:
        model.created_at = user.created_at

    if isinstance(user, NormalUser):
        model.detail = NormalUserDetailModel()
        apply_detail(model.detail, user)
    else:
        model.detail = None
    return model


def apply_detail(model: NormalUserDetailModel, user: NormalUser) -> None:
    """NormalUser의 세부 정보를 모델에 반영합니다."""
    model.contact = user.contact.value if user.contact else None
    model.back_social_id = user.back_social_id
    model.social_name = user.social_name
    model.public_amount = user.public_amount
    model.public_percent = user.public_percent

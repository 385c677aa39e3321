"""ORM Models."""

from apps.users.infrastructure.persistence_postgres.models.user import (
    NormalUserDetailModel,
    UserModel,
)

__all__ = ["UserModel", "NormalUserDetailModel"]

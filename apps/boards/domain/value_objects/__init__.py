"""Domain Value Objects."""

from apps.boards.domain.value_objects.user_info import UserInfo

__all__ = ["UserInfo"]

"""Domain Enums."""

from apps.users.domain.enums.job import Job
from apps.users.domain.enums.user_role import UserRole

__all__ = ["Job", "UserRole"]

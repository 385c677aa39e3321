"""Domain Entities."""

from apps.users.domain.entities.user import NormalUser, User

__all__ = ["User", "NormalUser"]

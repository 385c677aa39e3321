"""User services."""

from apps.users.application.user.services.user_service import UserService

__all__ = ["UserService"]

"""UserRole enum."""

from enum import Enum


class UserRole(str, Enum):
    NORMAL = "NORMAL"
    ADMIN = "ADMIN"

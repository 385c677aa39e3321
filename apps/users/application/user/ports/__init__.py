"""User ports (output port interfaces)."""

from apps.users.application.user.ports.normal_user_gateway import (
    ReadNormalUserOutputPort,
    SaveUserDetailOutputPort,
)
from apps.users.application.user.ports.user_gateway import (
    CreateUserOutputPort,
    ReadUserOutputPort,
)
from apps.users.application.user.ports.user_info_encoder import UserInfoEncoder

__all__ = [
    "CreateUserOutputPort",
    "ReadUserOutputPort",
    "ReadNormalUserOutputPort",
    "SaveUserDetailOutputPort",
    "UserInfoEncoder",
]

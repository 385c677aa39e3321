"""Domain Value Objects."""

from apps.users.domain.value_objects.birth import Birth
from apps.users.domain.value_objects.contact import Contact
from apps.users.domain.value_objects.image_url import ImageUrl
from apps.users.domain.value_objects.nickname import Nickname
from apps.users.domain.value_objects.tofin_id import TofinId
from apps.users.domain.value_objects.user_id import UserId

__all__ = ["Birth", "Contact", "ImageUrl", "Nickname", "TofinId", "UserId"]

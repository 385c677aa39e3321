"""Board interaction enums."""

from enum import Enum


class InteractionKind(str, Enum):
    """게시글 상호작용 종류."""

    LIKE = "like"
    BOOKMARK = "bookmark"


class InteractionStatus(str, Enum):
    """토글 결과. 레코드가 생겼으면 CREATED, 지워졌으면 CANCELED."""

    CREATED = "created"
    CANCELED = "canceled"

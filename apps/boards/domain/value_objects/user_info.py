"""UserInfo Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UserInfo:
    """게시글 작성자/행위자 정보.

    액세스 토큰 클레임에서 만들어지며, 게시글에는 작성 시점의 스냅샷으로 저장됩니다.
    """

    user_id: int
    nickname: str
    profile_image: str | None = None
    job: str | None = None

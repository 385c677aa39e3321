"""User service request DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SignUpServiceRequest:
    tofin_id: str
    user_info: str
    birth: date | str
    nickname: str
    job: str | None = None
    profile_image: str | None = None

    def __repr__(self) -> str:
        return f"SignUpServiceRequest(tofin_id={self.tofin_id!r}, nickname={self.nickname!r})"


@dataclass(frozen=True)
class SignInServiceRequest:
    tofin_id: str
    user_info: str

    def __repr__(self) -> str:
        return f"SignInServiceRequest(tofin_id={self.tofin_id!r})"


@dataclass(frozen=True)
class ConnectAssetsServiceRequest:
    user_id: int
    contact: str
    back_social_id: str
    social_name: str


@dataclass(frozen=True)
class SetPublicOptionServiceRequest:
    user_id: int
    public_amount: bool
    public_percent: bool

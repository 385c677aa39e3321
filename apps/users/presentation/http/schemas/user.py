"""User-related HTTP schemas.

요청/응답 본문은 camelCase 필드명을 사용합니다.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from apps.users.application.asset.dto import ConnectAssetInfoResponse
from apps.users.application.user.dto import (
    AvailableContactServiceResponse,
    AvailableTofinIdServiceResponse,
    ConnectAssetsServiceRequest,
    SetPublicOptionServiceRequest,
    SignInServiceRequest,
    SignUpServiceRequest,
    TokenInfoServiceResponse,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class SignUpRequest(CamelModel):
    """회원가입 요청 스키마."""

    tofin_id: str = Field(..., description="로그인 아이디 (8~30자 영문/숫자)")
    user_info: str = Field(..., min_length=1, description="비밀번호")
    birth: date = Field(..., description="생년월일 (YYYY-MM-DD)")
    nickname: str = Field(..., description="닉네임")
    job: str | None = Field(None, description="직업")
    profile_image: str | None = Field(None, description="프로필 이미지 URL")

    def to_service_request(self) -> SignUpServiceRequest:
        return SignUpServiceRequest(
            tofin_id=self.tofin_id,
            user_info=self.user_info,
            birth=self.birth,
            nickname=self.nickname,
            job=self.job,
            profile_image=self.profile_image,
        )


class SignInRequest(CamelModel):
    """로그인 요청 스키마."""

    tofin_id: str
    user_info: str

    def to_service_request(self) -> SignInServiceRequest:
        return SignInServiceRequest(tofin_id=self.tofin_id, user_info=self.user_info)


class ConnectAssetsRequest(CamelModel):
    """자산 연결 요청 스키마."""

    contact: str = Field(..., description="휴대폰 번호 (하이픈 없음)")
    back_social_id: str = Field(..., min_length=1, max_length=64, description="주민번호 뒷자리")
    social_name: str = Field(..., min_length=1, max_length=64, description="실명")

    def to_service_request(self, user_id: int) -> ConnectAssetsServiceRequest:
        return ConnectAssetsServiceRequest(
            user_id=user_id,
            contact=self.contact,
            back_social_id=self.back_social_id,
            social_name=self.social_name,
        )


class SetPublicOptionRequest(CamelModel):
    """자산 공개 옵션 요청 스키마."""

    public_amount: bool
    public_percent: bool

    def to_service_request(self, user_id: int) -> SetPublicOptionServiceRequest:
        return SetPublicOptionServiceRequest(
            user_id=user_id,
            public_amount=self.public_amount,
            public_percent=self.public_percent,
        )


class TokenInfoResponse(CamelModel):
    access_token: str
    refresh_token: str
    grant_type: str

    @classmethod
    def of(cls, response: TokenInfoServiceResponse) -> "TokenInfoResponse":
        return cls(
            access_token=response.access_token,
            refresh_token=response.refresh_token,
            grant_type=response.grant_type,
        )


class AvailableTofinIdResponse(CamelModel):
    tofin_id: str
    available: bool
    reason: str

    @classmethod
    def of(cls, response: AvailableTofinIdServiceResponse) -> "AvailableTofinIdResponse":
        return cls(tofin_id=response.tofin_id, available=response.available, reason=response.reason)


class AvailableContactResponse(CamelModel):
    contact: str
    available: bool
    reason: str

    @classmethod
    def of(cls, response: AvailableContactServiceResponse) -> "AvailableContactResponse":
        return cls(contact=response.contact, available=response.available, reason=response.reason)


class ConnectAssetInfo(CamelModel):
    """연결된 자산 항목 (계좌 또는 카드)."""

    product_type: str
    number: str
    name: str
    image: str | None = None
    cash: int | None = None

    @classmethod
    def of(cls, response: ConnectAssetInfoResponse) -> "ConnectAssetInfo":
        return cls(
            product_type=response.product_type,
            number=response.number,
            name=response.name,
            image=response.image,
            cash=response.cash,
        )

"""User use cases (input ports).

사용자 기능별 유스케이스 인터페이스입니다. 구현체는 UserService입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
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


class SignUpUseCase(Protocol):
    async def sign_up(self, request: SignUpServiceRequest) -> TokenInfoServiceResponse: ...


class SignInUseCase(Protocol):
    async def sign_in(self, request: SignInServiceRequest) -> TokenInfoServiceResponse: ...


class ReissueUseCase(Protocol):
    async def reissue(self, refresh_token: str | None) -> TokenInfoServiceResponse: ...


class LogoutUseCase(Protocol):
    async def logout(self, refresh_token: str | None) -> None: ...


class IsAvailableTofinIdUseCase(Protocol):
    async def is_available_tofin_id(self, tofin_id: str) -> AvailableTofinIdServiceResponse: ...


class IsAvailableContactUseCase(Protocol):
    async def is_available_contact(self, contact: str) -> AvailableContactServiceResponse: ...


class ConnectAssetUseCase(Protocol):
    async def connect_assets(
        self, request: ConnectAssetsServiceRequest
    ) -> list[ConnectAssetInfoResponse]: ...


class SetPublicOptionUseCase(Protocol):
    async def set_public_option(self, request: SetPublicOptionServiceRequest) -> None: ...

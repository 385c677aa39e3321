"""HTTP request/response schemas."""

from apps.users.presentation.http.schemas.user import (
    AvailableContactResponse,
    AvailableTofinIdResponse,
    ConnectAssetInfo,
    ConnectAssetsRequest,
    SetPublicOptionRequest,
    SignInRequest,
    SignUpRequest,
    TokenInfoResponse,
)

__all__ = [
    "SignUpRequest",
    "SignInRequest",
    "ConnectAssetsRequest",
    "SetPublicOptionRequest",
    "TokenInfoResponse",
    "AvailableTofinIdResponse",
    "AvailableContactResponse",
    "ConnectAssetInfo",
]

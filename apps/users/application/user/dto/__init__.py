"""User service DTOs."""

from apps.users.application.user.dto.requests import (
    ConnectAssetsServiceRequest,
    SetPublicOptionServiceRequest,
    SignInServiceRequest,
    SignUpServiceRequest,
)
from apps.users.application.user.dto.responses import (
    AvailableContactServiceResponse,
    AvailableTofinIdServiceResponse,
    TokenInfoServiceResponse,
)

__all__ = [
    "ConnectAssetsServiceRequest",
    "SetPublicOptionServiceRequest",
    "SignInServiceRequest",
    "SignUpServiceRequest",
    "AvailableContactServiceResponse",
    "AvailableTofinIdServiceResponse",
    "TokenInfoServiceResponse",
]

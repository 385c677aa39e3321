"""Token ports."""

from apps.users.application.token.ports.refresh_token_store import RefreshTokenOutputPort
from apps.users.application.token.ports.token_issuer import TokenInfo, TokenIssuer

__all__ = ["RefreshTokenOutputPort", "TokenInfo", "TokenIssuer"]

"""Security helpers shared across services."""

from apps._shared.security.dependencies import build_auth_user_dependency, parse_bearer
from apps._shared.security.jwt import TokenableUser, TokenType, decode_token

__all__ = [
    "build_auth_user_dependency",
    "parse_bearer",
    "TokenableUser",
    "TokenType",
    "decode_token",
]

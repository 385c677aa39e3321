"""Security adapters."""

from apps.users.infrastructure.security.jwt_token_service import JwtTokenService
from apps.users.infrastructure.security.user_info_encoder_pwdlib import PwdlibUserInfoEncoder

__all__ = ["JwtTokenService", "PwdlibUserInfoEncoder"]

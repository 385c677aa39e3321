"""pwdlib 기반 UserInfoEncoder 구현체."""

from __future__ import annotations

from pwdlib import PasswordHash
from pwdlib.exceptions import PwdlibError


class PwdlibUserInfoEncoder:
    """Argon2 해시 인코더 (PasswordHash.recommended())."""

    def __init__(self, password_hash: PasswordHash | None = None) -> None:
        self._password_hash = password_hash or PasswordHash.recommended()

    def hashed(self, raw: str) -> str:
        return self._password_hash.hash(raw)

    def matches(self, raw: str, hashed: str) -> bool:
        if not raw or not hashed:
            return False
        try:
            return self._password_hash.verify(raw, hashed)
        except PwdlibError:
            # 알 수 없는 해시 포맷
            return False

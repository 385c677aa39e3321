"""UserInfoEncoder Port.

비밀번호 단방향 해시를 위한 인터페이스입니다.
"""

from typing import Protocol


class UserInfoEncoder(Protocol):
    """비밀번호 인코더 인터페이스.

    구현체:
        - PwdlibUserInfoEncoder (infrastructure/security/)
    """

    def hashed(self, raw: str) -> str:
        """평문을 해시합니다."""
        ...

    def matches(self, raw: str, hashed: str) -> bool:
        """평문이 해시와 일치하는지 확인합니다. 복호화는 불가능합니다."""
        ...

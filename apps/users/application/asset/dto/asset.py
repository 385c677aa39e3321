"""Asset DTOs.

외부 자산 제공자의 계좌/카드 응답과, 이를 하나로 합친 연결 결과입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

CARD_PRODUCT_TYPE = "CARD"


@dataclass(frozen=True)
class AccountResponse:
    """계좌 정보."""

    account_number: str
    account_type: str
    name: str
    cash: int | None = None
    logo: str | None = None


@dataclass(frozen=True)
class CardResponse:
    """카드 정보."""

    card_number: str
    name: str
    image: str | None = None


@dataclass(frozen=True)
class AssetInfoResponse:
    """자산 스냅샷."""

    accounts: list[AccountResponse] = field(default_factory=list)
    cards: list[CardResponse] = field(default_factory=list)


@dataclass(frozen=True)
class ConnectAssetInfoResponse:
    """자산 연결 결과 항목.

    계좌는 계좌 타입을, 카드는 "CARD"를 product_type으로 가집니다.
    """

    product_type: str
    number: str
    name: str
    image: str | None = None
    cash: int | None = None

    @classmethod
    def from_account(cls, account: AccountResponse) -> "ConnectAssetInfoResponse":
        return cls(
            product_type=account.account_type,
            number=account.account_number,
            name=account.name,
            image=account.logo,
            cash=account.cash,
        )

    @classmethod
    def from_card(cls, card: CardResponse) -> "ConnectAssetInfoResponse":
        return cls(
            product_type=CARD_PRODUCT_TYPE,
            number=card.card_number,
            name=card.name,
            image=card.image,
        )

"""Asset DTOs."""

from apps.users.application.asset.dto.asset import (
    CARD_PRODUCT_TYPE,
    AccountResponse,
    AssetInfoResponse,
    CardResponse,
    ConnectAssetInfoResponse,
)

__all__ = [
    "CARD_PRODUCT_TYPE",
    "AccountResponse",
    "AssetInfoResponse",
    "CardResponse",
    "ConnectAssetInfoResponse",
]

"""GetAssets Port.

외부 자산 제공자(계좌/카드) 조회 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.users.application.asset.dto import AssetInfoResponse
    from apps.users.domain.entities.user import NormalUser


class GetAssetsOutputPort(Protocol):
    """자산 조회 포트.

    구현체:
        - HttpAssetProviderClient (infrastructure/integrations/asset_provider/)
    """

    async def get_assets(self, user: NormalUser) -> AssetInfoResponse:
        """연결된 사용자의 계좌/카드 스냅샷을 조회합니다.

        Raises:
            ExternalServiceError: 자산 제공자 호출 실패
        """
        ...

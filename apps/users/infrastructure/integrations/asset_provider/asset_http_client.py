"""Asset Provider HTTP Client.

GetAssetsOutputPort 포트의 구현체입니다.

요청:
    POST {base_url}/assets
    {"socialName": ..., "contact": ..., "backSocialId": ...}

응답:
    {"accounts": [{"accountNumber", "accountType", "name", "cash", "logo"}],
     "cards": [{"cardNumber", "name", "image"}]}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from apps.users.application.asset.dto import (
    AccountResponse,
    AssetInfoResponse,
    CardResponse,
)
from apps.users.application.common.exceptions import ExternalServiceError

if TYPE_CHECKING:
    from apps.users.domain.entities.user import NormalUser

logger = logging.getLogger(__name__)

ASSETS_PATH = "/assets"
ASSET_PROVIDER_UNAVAILABLE = "자산 정보를 가져올 수 없습니다."


class HttpAssetProviderClient:
    """httpx 기반 자산 제공자 클라이언트.

    AsyncClient는 첫 호출 시 생성되며 close()로 정리합니다.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def get_assets(self, user: "NormalUser") -> AssetInfoResponse:
        """연결된 사용자의 계좌/카드를 조회합니다.

        Raises:
            ExternalServiceError: 네트워크 오류, 비정상 응답, 파싱 실패
        """
        body = {
            "socialName": user.social_name,
            "contact": str(user.contact) if user.contact else None,
            "backSocialId": user.back_social_id,
        }

        try:
            response = await self._get_client().post(ASSETS_PATH, json=body)
            response.raise_for_status()
            return self._parse(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Asset provider API error",
                extra={"status_code": e.response.status_code, "user_id": str(user.id)},
            )
            raise ExternalServiceError(ASSET_PROVIDER_UNAVAILABLE) from e
        except httpx.HTTPError as e:
            logger.warning("Asset provider request failed", extra={"error": str(e)})
            raise ExternalServiceError(ASSET_PROVIDER_UNAVAILABLE) from e
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Asset provider returned malformed payload", extra={"error": str(e)})
            raise ExternalServiceError(ASSET_PROVIDER_UNAVAILABLE) from e

    @staticmethod
    def _parse(payload: dict[str, Any]) -> AssetInfoResponse:
        accounts = [
            AccountResponse(
                account_number=item["accountNumber"],
                account_type=item["accountType"],
                name=item["name"],
                cash=item.get("cash"),
                logo=item.get("logo"),
            )
            for item in payload.get("accounts") or []
        ]
        cards = [
            CardResponse(
                card_number=item["cardNumber"],
                name=item["name"],
                image=item.get("image"),
            )
            for item in payload.get("cards") or []
        ]
        return AssetInfoResponse(accounts=accounts, cards=cards)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

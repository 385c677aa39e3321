"""External asset provider integration."""

from apps.users.infrastructure.integrations.asset_provider.asset_http_client import (
    HttpAssetProviderClient,
)

__all__ = ["HttpAssetProviderClient"]

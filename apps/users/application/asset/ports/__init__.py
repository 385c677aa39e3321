"""Asset ports."""

from apps.users.application.asset.ports.asset_gateway import GetAssetsOutputPort

__all__ = ["GetAssetsOutputPort"]

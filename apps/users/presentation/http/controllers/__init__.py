"""HTTP controllers (routers)."""

from apps.users.presentation.http.controllers.assets import router as assets_router
from apps.users.presentation.http.controllers.auth import router as auth_router
from apps.users.presentation.http.controllers.availability import (
    router as availability_router,
)
from apps.users.presentation.http.controllers.health import router as health_router

__all__ = ["auth_router", "availability_router", "assets_router", "health_router"]

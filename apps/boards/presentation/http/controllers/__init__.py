"""HTTP controllers (routers)."""

from apps.boards.presentation.http.controllers.board import router as board_router
from apps.boards.presentation.http.controllers.health import router as health_router

__all__ = ["board_router", "health_router"]

"""Presentation routes package."""

from camstream.presentation.routes.proxy_routes import router as proxy_router
from camstream.presentation.routes.player_routes import router as player_router


__all__ = ['proxy_router', 'player_router']

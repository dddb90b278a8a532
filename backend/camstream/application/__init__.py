"""Application Layer - startup sequence, refresh and URL rewriting."""
from .url_rewrite import append_federated_token, federated_request_modifier
from .token_refresher import TokenRefresher, refresh_interval
from .use_cases import StartLiveStreamUseCase, require_configured

__all__ = [
    "append_federated_token",
    "federated_request_modifier",
    "TokenRefresher",
    "refresh_interval",
    "StartLiveStreamUseCase",
    "require_configured",
]

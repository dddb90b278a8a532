"""Infrastructure Layer - External interfaces and implementations."""

from .media_api import MediaApiClient, get_media_api_client
from .proxy import ProxyClient
from .player import ManifestPlayer

__all__ = [
    "MediaApiClient",
    "get_media_api_client",
    "ProxyClient",
    "ManifestPlayer",
]

"""Proxy client module."""
from .proxy_client import ProxyClient, TOKEN_ENDPOINT, MEDIA_URIS_ENDPOINT

__all__ = ['ProxyClient', 'TOKEN_ENDPOINT', 'MEDIA_URIS_ENDPOINT']

"""Vendor media API client (proxy side, holds the API key)."""

import logging
from typing import Any, Dict, Optional

import httpx

from ...core.config import settings, is_placeholder
from ...core.exceptions import MissingConfigurationError
from ..http import post_json

logger = logging.getLogger(__name__)


class MediaApiClient:
    """
    Forwards token and media URI requests to the vendor API.

    The API key is attached here and nowhere else; it is never returned
    to callers or written to logs.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        token_path: Optional[str] = None,
        uris_path: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize vendor client. Settings fill any argument not provided."""
        self.base_url = (base_url or settings.media_api_base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.media_api_key
        self.token_path = token_path or settings.media_api_token_path
        self.uris_path = uris_path or settings.media_api_uris_path
        self.timeout = timeout or settings.media_api_timeout
        self._transport = transport

        self.client: Optional[httpx.AsyncClient] = None
        self.is_connected = False

        # Metrics
        self.requests_sent = 0
        self.requests_failed = 0

    async def connect(self) -> None:
        """Open the HTTP connection pool. Refuses to start without an API key."""
        if is_placeholder(self.api_key):
            raise MissingConfigurationError(["media_api_key"])

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )
        self.is_connected = True
        logger.info(f"Media API client ready: {self.base_url}")

    async def disconnect(self) -> None:
        """Close the connection pool."""
        if self.client:
            await self.client.aclose()
            self.client = None
            self.is_connected = False
            logger.info("Media API client closed")

    def _headers(self) -> Dict[str, str]:
        return {
            "x-auth-scheme": "api-token",
            "x-auth-apikey": self.api_key,
            "Accept": "application/json",
        }

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        if not self.client:
            await self.connect()

        self.requests_sent += 1
        try:
            return await post_json(self.client, path, payload, headers=self._headers())
        except Exception:
            self.requests_failed += 1
            raise

    async def generate_federated_token(self, duration_sec: int) -> Dict[str, Any]:
        """Ask the vendor for a federated session token valid for duration_sec."""
        logger.debug(f"Requesting federated token, durationSec={duration_sec}")
        return await self._post(self.token_path, {"durationSec": duration_sec})

    async def get_media_uris(self, camera_uuid: str) -> Dict[str, Any]:
        """Fetch every stream URI the vendor exposes for camera_uuid."""
        logger.debug(f"Requesting media URIs for camera {camera_uuid}")
        return await self._post(self.uris_path, {"cameraUuid": camera_uuid})

    def get_stats(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "is_connected": self.is_connected,
            "requests_sent": self.requests_sent,
            "requests_failed": self.requests_failed,
        }


# Global client instance
_media_api_client: Optional[MediaApiClient] = None


def get_media_api_client() -> MediaApiClient:
    """Get or create the vendor client singleton."""
    global _media_api_client
    if _media_api_client is None:
        _media_api_client = MediaApiClient()
    return _media_api_client

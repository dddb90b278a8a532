"""Client for the credential-shielding proxy (player side)."""

import logging
from typing import Optional

import httpx

from ...core.config import settings
from ...core.exceptions import MalformedResponseError
from ...domain.entities import FederatedToken, MediaUris
from ..http import post_json

logger = logging.getLogger(__name__)

TOKEN_ENDPOINT = "/api/federated-token"
MEDIA_URIS_ENDPOINT = "/api/media-uris"


class ProxyClient:
    """
    Issues the two startup calls against the proxy.

    One request per call, no retries. Failures surface as
    StreamSetupError subclasses and the caller restarts the sequence.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize proxy client.

        Args:
            base_url: Proxy root, e.g. "http://localhost:8000"
            timeout: Per-request timeout in seconds
            client: Pre-built httpx client (tests pass one with a mock transport)
        """
        self.base_url = (base_url if base_url is not None else settings.proxy_base_url).rstrip("/")
        self.timeout = timeout or settings.request_timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ProxyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def acquire_token(self, duration_sec: int) -> FederatedToken:
        """Request a federated token valid for duration_sec seconds."""
        if isinstance(duration_sec, bool) or not isinstance(duration_sec, int) or duration_sec <= 0:
            raise ValueError(f"duration_sec must be a positive integer, got {duration_sec!r}")

        body = await post_json(
            self.client,
            f"{self.base_url}{TOKEN_ENDPOINT}",
            {"durationSec": duration_sec},
        )

        value = body.get("federatedSessionToken")
        if not isinstance(value, str) or not value:
            raise MalformedResponseError("Token response has no federatedSessionToken")

        logger.debug(f"Acquired federated token, durationSec={duration_sec}")
        return FederatedToken(value=value, duration_sec=duration_sec)

    async def resolve_media_uris(self, camera_id: str) -> MediaUris:
        """Fetch all stream URIs for camera_id."""
        body = await post_json(
            self.client,
            f"{self.base_url}{MEDIA_URIS_ENDPOINT}",
            {"cameraUuid": camera_id},
        )
        return MediaUris.from_payload(camera_id, body)

    async def resolve_manifest_url(self, camera_id: str) -> Optional[str]:
        """Return wanLiveMpdUri verbatim, or None when the field is absent."""
        uris = await self.resolve_media_uris(camera_id)
        return uris.manifest_url

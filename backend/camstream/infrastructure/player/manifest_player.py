"""Headless DASH player that fetches through the request modifier."""

import logging
from typing import Optional

import httpx

from ...core.exceptions import TransportError, UpstreamStatusError
from ...domain.entities import PlayerSettings
from ...domain.interfaces import IStreamPlayer, RequestModifier

logger = logging.getLogger(__name__)


class ManifestPlayer(IStreamPlayer):
    """
    Stands in for a browser player outside the browser.

    It does not decode media. initialize() fetches the manifest once to
    prove the stream is reachable with the current token. After that,
    fetch() serves manifest or segment requests through the same hook.
    """

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

        self.manifest_url: Optional[str] = None
        self.manifest: Optional[str] = None
        self.settings: Optional[PlayerSettings] = None
        self._request_modifier: Optional[RequestModifier] = None
        self._playing = False
        self.initializations = 0

    @property
    def is_playing(self) -> bool:
        return self._playing

    async def initialize(
        self,
        manifest_url: str,
        request_modifier: RequestModifier,
        settings: PlayerSettings,
    ) -> None:
        if self._playing:
            raise RuntimeError("Player already initialized; call reset() first")
        if not manifest_url:
            raise TransportError("No manifest URL to play")

        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )

        self.manifest_url = manifest_url
        self.settings = settings
        self._request_modifier = request_modifier

        try:
            response = await self.fetch(manifest_url)
        except Exception:
            self._request_modifier = None
            raise
        self.manifest = response.text
        self._playing = True
        self.initializations += 1
        logger.info(f"Manifest loaded ({len(self.manifest)} bytes), playback running")

    async def fetch(self, url: str) -> httpx.Response:
        """GET a media URL with the request modifier applied."""
        if self._request_modifier is None or self._client is None:
            raise RuntimeError("Player is not initialized")

        target = self._request_modifier(url)
        try:
            response = await self._client.get(target)
        except httpx.TimeoutException as e:
            raise TransportError(f"Timed out fetching {url}", url=url, timed_out=True) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Fetching {url} failed: {e}", url=url) from e

        if not response.is_success:
            # Report the unmodified URL so the token stays out of errors
            raise UpstreamStatusError(response.status_code, url)
        return response

    async def reset(self) -> None:
        self._playing = False
        self._request_modifier = None
        self.manifest = None
        logger.debug("Player reset")

    async def close(self) -> None:
        await self.reset()
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

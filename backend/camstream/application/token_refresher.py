"""Periodic federated token refresh for a running playback session."""

import asyncio
import logging
from typing import Optional, Dict, Any

from ..core.exceptions import StreamSetupError
from ..domain.entities import PlaybackSession, PlayerSettings
from ..domain.interfaces import IStreamPlayer
from .url_rewrite import federated_request_modifier

logger = logging.getLogger(__name__)

MIN_REFRESH_INTERVAL_SEC = 30
# Share of the validity window used when the token is too short for margin and floor
SHORT_TOKEN_REFRESH_RATIO = 0.8


def refresh_interval(duration_sec: int, margin_sec: int) -> float:
    """
    Seconds between refreshes.

    Renews margin_sec before expiry, never faster than the floor, and
    always strictly inside the token's validity window.
    """
    interval = duration_sec - margin_sec
    if interval < MIN_REFRESH_INTERVAL_SEC:
        interval = min(MIN_REFRESH_INTERVAL_SEC, duration_sec * SHORT_TOKEN_REFRESH_RATIO)
    return float(interval)


class TokenRefresher:
    """
    Background task that renews the token before it expires.

    Each tick acquires a new token, tears the player down and initializes
    it again on the same manifest URL. The player binds its request
    modifier at initialization, so the token cannot be swapped in place.

    A failed refresh marks the session as errored and ends the task.
    """

    def __init__(
        self,
        session: PlaybackSession,
        proxy_client,
        player: IStreamPlayer,
        player_settings: Optional[PlayerSettings] = None,
        duration_sec: int = 86400,
        margin_sec: int = 300,
        interval_sec: Optional[float] = None,
    ):
        """
        Initialize token refresher.

        Args:
            session: Running playback session
            proxy_client: Client for the proxy token endpoint
            player: Player to reinitialize with each new token
            player_settings: Tuning applied on reinitialization
            duration_sec: Validity requested for each new token
            margin_sec: How long before expiry to refresh
            interval_sec: Explicit period, overrides duration/margin
        """
        self.session = session
        self.proxy_client = proxy_client
        self.player = player
        self.player_settings = player_settings or PlayerSettings()
        self.duration_sec = duration_sec
        self.interval_sec = interval_sec or refresh_interval(duration_sec, margin_sec)

        self.is_running = False
        self.task: Optional[asyncio.Task] = None
        self.refreshes = 0
        self.last_error: Optional[str] = None

    async def start(self) -> None:
        """Start the refresh background task."""
        if self.is_running:
            logger.warning(f"[{self.session.camera_id}] Token refresher already running")
            return

        self.is_running = True
        self.task = asyncio.create_task(self._run())
        logger.info(
            f"[{self.session.camera_id}] Token refresher started, "
            f"interval={self.interval_sec:.0f}s"
        )

    async def stop(self) -> None:
        """Stop the timer. Playback is left as is."""
        if not self.is_running and self.task is None:
            return

        self.is_running = False

        if self.task:
            self.task.cancel()
            try:
                await self.task
            except asyncio.CancelledError:
                pass
            self.task = None

        logger.info(f"[{self.session.camera_id}] Token refresher stopped")

    async def refresh_once(self) -> None:
        """Acquire a new token and reinitialize the player with it."""
        camera_id = self.session.camera_id
        self.session.mark_refreshing()

        token = await self.proxy_client.acquire_token(self.duration_sec)

        await self.player.reset()
        await self.player.initialize(
            self.session.manifest_url,
            federated_request_modifier(token.value),
            self.player_settings,
        )

        self.session.token_refreshed(token)
        self.refreshes += 1
        logger.info(
            f"[{camera_id}] Token refreshed (#{self.session.refresh_count}), "
            f"expires at {token.expires_at.isoformat()}"
        )

    async def _run(self) -> None:
        """Refresh loop (runs as background task)."""
        try:
            while self.is_running:
                await asyncio.sleep(self.interval_sec)
                await self.refresh_once()
        except asyncio.CancelledError:
            raise
        except StreamSetupError as e:
            self.last_error = str(e)
            self.session.mark_error()
            logger.error(f"[{self.session.camera_id}] Token refresh failed: {e}")
        except Exception as e:
            self.last_error = str(e)
            self.session.mark_error()
            logger.error(f"[{self.session.camera_id}] Token refresher error: {e}", exc_info=True)
        finally:
            self.is_running = False

    def get_stats(self) -> Dict[str, Any]:
        return {
            "camera_id": self.session.camera_id,
            "is_running": self.is_running,
            "interval_sec": self.interval_sec,
            "refreshes": self.refreshes,
            "last_error": self.last_error,
        }

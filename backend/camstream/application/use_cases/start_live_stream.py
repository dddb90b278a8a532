"""Live stream startup - token, then manifest, then player."""
import logging
from typing import Optional
from uuid import uuid4

from ...core.config import is_placeholder
from ...core.exceptions import MissingConfigurationError, StreamSetupError
from ...domain.entities import PlaybackSession, PlayerSettings
from ...domain.interfaces import IStreamPlayer
from ..url_rewrite import federated_request_modifier

logger = logging.getLogger(__name__)


def is_valid_duration(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def require_configured(token_duration_sec=None, **values) -> None:
    """Raise MissingConfigurationError naming every unset, placeholder or invalid value."""
    missing = [name for name, value in values.items() if is_placeholder(value)]
    if token_duration_sec is not None and not is_valid_duration(token_duration_sec):
        missing.append("token_duration_sec")
    if missing:
        raise MissingConfigurationError(missing)


class StartLiveStreamUseCase:
    """Use case for starting live playback of one camera"""

    def __init__(
        self,
        proxy_client,
        player: IStreamPlayer,
        player_settings: Optional[PlayerSettings] = None,
        token_duration_sec: int = 86400,
    ):
        self.proxy_client = proxy_client
        self.player = player
        self.player_settings = player_settings or PlayerSettings()
        self.token_duration_sec = token_duration_sec

    async def execute(self, camera_id: str) -> PlaybackSession:
        """Execute the startup sequence. Any failure halts it."""
        # Nothing goes on the wire until configuration is complete
        require_configured(
            camera_id=camera_id,
            proxy_base_url=getattr(self.proxy_client, "base_url", None),
            token_duration_sec=self.token_duration_sec,
        )

        session = PlaybackSession(id=str(uuid4()), camera_id=camera_id)
        logger.info(f"[{camera_id}] Starting playback session {session.id}")

        try:
            token = await self.proxy_client.acquire_token(self.token_duration_sec)

            manifest_url = await self.proxy_client.resolve_manifest_url(camera_id)
            if not manifest_url:
                logger.warning(
                    f"[{camera_id}] Media URI response has no wanLiveMpdUri; "
                    f"player will start without a manifest"
                )

            await self.player.initialize(
                manifest_url,
                federated_request_modifier(token.value),
                self.player_settings,
            )
        except StreamSetupError as e:
            session.mark_error()
            logger.error(f"[{camera_id}] Startup halted: {e}")
            raise

        session.start(token, manifest_url)
        logger.info(f"[{camera_id}] Playback started, token expires at {token.expires_at.isoformat()}")
        return session

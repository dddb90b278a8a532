"""PlaybackSession Entity - one live playback from token to teardown"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from enum import Enum

from .token import FederatedToken


class PlaybackStatus(str, Enum):
    """Playback session status"""
    STARTING = "starting"
    PLAYING = "playing"
    REFRESHING = "refreshing"
    STOPPED = "stopped"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PlaybackSession:
    """
    PlaybackSession Entity - Represents an active playback

    Holds the token and manifest URL for a single camera. Nothing here
    is persisted; a new session is created on every startup.
    """
    id: str
    camera_id: str
    status: PlaybackStatus = PlaybackStatus.STARTING
    manifest_url: Optional[str] = None
    token: Optional[FederatedToken] = field(default=None, repr=False)
    started_at: Optional[datetime] = None
    stopped_at: Optional[datetime] = None
    refresh_count: int = 0

    def start(self, token: FederatedToken, manifest_url: Optional[str]) -> None:
        """Start playback session"""
        self.token = token
        self.manifest_url = manifest_url
        self.status = PlaybackStatus.PLAYING
        self.started_at = _utcnow()
        self.stopped_at = None

    def mark_refreshing(self) -> None:
        self.status = PlaybackStatus.REFRESHING

    def token_refreshed(self, token: FederatedToken) -> None:
        """Swap in a new token after the player was reinitialized"""
        self.token = token
        self.refresh_count += 1
        self.status = PlaybackStatus.PLAYING

    def stop(self) -> None:
        """Stop playback session"""
        self.status = PlaybackStatus.STOPPED
        self.stopped_at = _utcnow()

    def mark_error(self) -> None:
        self.status = PlaybackStatus.ERROR
        self.stopped_at = _utcnow()

    def is_active(self) -> bool:
        return self.status in (PlaybackStatus.PLAYING, PlaybackStatus.REFRESHING)

    def get_duration(self) -> Optional[float]:
        """Get session duration in seconds"""
        if not self.started_at:
            return None

        end_time = self.stopped_at or _utcnow()
        return (end_time - self.started_at).total_seconds()

"""Domain Entities - Enterprise Business Rules"""
from .token import FederatedToken
from .media_uris import MediaUris
from .playback_session import PlaybackSession, PlaybackStatus
from .player_settings import PlayerSettings

__all__ = ["FederatedToken", "MediaUris", "PlaybackSession", "PlaybackStatus", "PlayerSettings"]

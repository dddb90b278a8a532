"""PlayerSettings - fixed tuning bag for the DASH player"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PlayerSettings:
    """
    Buffering and live catch-up targets.

    The camera publishes a single quality, so ABR switching is off.
    """
    stable_buffer_time: float = 4.0
    buffer_time_at_top_quality: float = 4.0
    live_delay: float = 3.0
    catchup_enabled: bool = True
    catchup_max_drift: float = 5.0
    catchup_playback_rate: float = 0.5
    auto_switch_bitrate: bool = False

    def __post_init__(self):
        if self.stable_buffer_time <= 0 or self.buffer_time_at_top_quality <= 0:
            raise ValueError("Buffer targets must be positive")
        if self.live_delay < 0:
            raise ValueError("Live delay cannot be negative")
        if not 0 < self.catchup_playback_rate <= 1:
            raise ValueError("Catch-up playback rate must be in (0, 1]")

    @classmethod
    def from_config(cls, config) -> "PlayerSettings":
        return cls(
            stable_buffer_time=config.player_stable_buffer_time,
            buffer_time_at_top_quality=config.player_buffer_time_at_top_quality,
            live_delay=config.player_live_delay,
            catchup_max_drift=config.player_catchup_max_drift,
            catchup_playback_rate=config.player_catchup_playback_rate,
        )

    def to_dashjs(self) -> Dict[str, Any]:
        """Render as the argument to dash.js MediaPlayer.updateSettings()"""
        return {
            "streaming": {
                "buffer": {
                    "stableBufferTime": self.stable_buffer_time,
                    "bufferTimeAtTopQuality": self.buffer_time_at_top_quality,
                },
                "delay": {
                    "liveDelay": self.live_delay,
                },
                "liveCatchup": {
                    "enabled": self.catchup_enabled,
                    "maxDrift": self.catchup_max_drift,
                    "playbackRate": {
                        "min": -self.catchup_playback_rate,
                        "max": self.catchup_playback_rate,
                    },
                },
                "abr": {
                    "autoSwitchBitrate": {
                        "video": self.auto_switch_bitrate,
                        "audio": self.auto_switch_bitrate,
                    },
                },
            }
        }

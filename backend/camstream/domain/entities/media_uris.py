"""MediaUris Entity - stream locations returned for one camera"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _as_list(value: Any) -> List[str]:
    if isinstance(value, list):
        return [v for v in value if isinstance(v, str)]
    return []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass
class MediaUris:
    """
    All URI families the vendor returns for a camera.

    Playback uses wan_live_mpd_uri only. The HLS and WebSocket fields
    sit in the same payload and are easy to pick by mistake.
    """
    camera_id: str
    wan_live_mpd_uri: Optional[str] = None
    wan_live_m3u8_uri: Optional[str] = None
    wan_live_h264_uri: Optional[str] = None
    lan_live_mpd_uris: List[str] = field(default_factory=list)
    lan_live_m3u8_uris: List[str] = field(default_factory=list)
    lan_live_h264_uris: List[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, camera_id: str, payload: Dict[str, Any]) -> "MediaUris":
        """Build from the vendor JSON object. Missing fields stay empty."""
        return cls(
            camera_id=camera_id,
            wan_live_mpd_uri=_as_str(payload.get("wanLiveMpdUri")),
            wan_live_m3u8_uri=_as_str(payload.get("wanLiveM3u8Uri")),
            wan_live_h264_uri=_as_str(payload.get("wanLiveH264Uri")),
            lan_live_mpd_uris=_as_list(payload.get("lanLiveMpdUris")),
            lan_live_m3u8_uris=_as_list(payload.get("lanLiveM3u8Uris")),
            lan_live_h264_uris=_as_list(payload.get("lanLiveH264Uris")),
        )

    @property
    def manifest_url(self) -> Optional[str]:
        """DASH manifest used for playback"""
        return self.wan_live_mpd_uri

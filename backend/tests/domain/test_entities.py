"""
Domain Entity Unit Tests

Tests:
    - FederatedToken expiry math and masking
    - MediaUris picks wanLiveMpdUri, never HLS / WebSocket
    - PlaybackSession lifecycle transitions
    - PlayerSettings validation and dash.js rendering

Usage:
    pytest backend/tests/domain/test_entities.py -v
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from camstream.domain.entities import (
    FederatedToken,
    MediaUris,
    PlaybackSession,
    PlaybackStatus,
    PlayerSettings,
)

ISSUED = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestFederatedToken:
    """Test token value object"""

    def test_expires_at(self):
        token = FederatedToken(value="abc123", duration_sec=86400, issued_at=ISSUED)

        assert token.expires_at == ISSUED + timedelta(days=1)

    def test_is_expiring_inside_margin(self):
        token = FederatedToken(value="abc123", duration_sec=600, issued_at=ISSUED)

        assert token.is_expiring(300, now=ISSUED + timedelta(seconds=301)) is True
        assert token.is_expiring(300, now=ISSUED + timedelta(seconds=100)) is False

    def test_value_never_in_repr_or_str(self):
        token = FederatedToken(value="super-secret", duration_sec=60)

        assert "super-secret" not in repr(token)
        assert "super-secret" not in str(token)

    @pytest.mark.parametrize("value,duration", [("", 60), ("abc", 0), ("abc", -1)])
    def test_invalid_token(self, value, duration):
        with pytest.raises(ValueError):
            FederatedToken(value=value, duration_sec=duration)


class TestMediaUris:
    """Test media URI payload parsing"""

    def test_manifest_is_wan_mpd(self):
        uris = MediaUris.from_payload("cam-1", {
            "wanLiveMpdUri": "https://x/file.mpd",
            "wanLiveM3u8Uri": "https://x/file.m3u8",
            "wanLiveH264Uri": "wss://x/ws",
        })

        assert uris.manifest_url == "https://x/file.mpd"

    def test_hls_not_used_as_fallback(self):
        uris = MediaUris.from_payload("cam-1", {"wanLiveM3u8Uri": "https://x/file.m3u8"})

        assert uris.manifest_url is None

    def test_wrong_types_ignored(self):
        uris = MediaUris.from_payload("cam-1", {
            "wanLiveMpdUri": 5,
            "lanLiveMpdUris": "https://10.0.0.5/file.mpd",
            "lanLiveM3u8Uris": ["https://10.0.0.5/a.m3u8", None],
        })

        assert uris.wan_live_mpd_uri is None
        assert uris.lan_live_mpd_uris == []
        assert uris.lan_live_m3u8_uris == ["https://10.0.0.5/a.m3u8"]


class TestPlaybackSession:
    """Test session lifecycle"""

    def test_new_session_starting(self):
        session = PlaybackSession(id="s-1", camera_id="cam-1")

        assert session.status == PlaybackStatus.STARTING
        assert session.get_duration() is None
        assert session.is_active() is False

    def test_start_refresh_stop(self):
        session = PlaybackSession(id="s-1", camera_id="cam-1")
        session.start(FederatedToken(value="a", duration_sec=60), "https://x/file.mpd")
        assert session.is_active() is True

        session.mark_refreshing()
        assert session.status == PlaybackStatus.REFRESHING
        assert session.is_active() is True

        session.token_refreshed(FederatedToken(value="b", duration_sec=60))
        assert session.status == PlaybackStatus.PLAYING
        assert session.refresh_count == 1
        assert session.token.value == "b"

        session.stop()
        assert session.status == PlaybackStatus.STOPPED
        assert session.is_active() is False
        assert session.get_duration() >= 0

    def test_mark_error(self):
        session = PlaybackSession(id="s-1", camera_id="cam-1")
        session.mark_error()

        assert session.status == PlaybackStatus.ERROR
        assert session.stopped_at is not None


class TestPlayerSettings:
    """Test tuning bag"""

    def test_defaults_render_to_dashjs(self):
        streaming = PlayerSettings().to_dashjs()["streaming"]

        assert streaming["buffer"] == {"stableBufferTime": 4.0, "bufferTimeAtTopQuality": 4.0}
        assert streaming["delay"] == {"liveDelay": 3.0}
        assert streaming["liveCatchup"]["enabled"] is True
        assert streaming["liveCatchup"]["maxDrift"] == 5.0
        assert streaming["liveCatchup"]["playbackRate"] == {"min": -0.5, "max": 0.5}
        assert streaming["abr"]["autoSwitchBitrate"] == {"video": False, "audio": False}

    def test_from_config(self):
        config = SimpleNamespace(
            player_stable_buffer_time=2,
            player_buffer_time_at_top_quality=6,
            player_live_delay=1.5,
            player_catchup_max_drift=3,
            player_catchup_playback_rate=0.3,
        )

        settings = PlayerSettings.from_config(config)

        assert settings.stable_buffer_time == 2
        assert settings.live_delay == 1.5
        assert settings.catchup_playback_rate == 0.3
        assert settings.auto_switch_bitrate is False

    @pytest.mark.parametrize("kwargs", [
        {"stable_buffer_time": 0},
        {"live_delay": -1},
        {"catchup_playback_rate": 0},
        {"catchup_playback_rate": 1.5},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            PlayerSettings(**kwargs)

"""Application configuration."""

import os
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings


# Values copied verbatim from example .env files count as unset
PLACEHOLDER_MARKERS = ("YOUR_", "<", "CHANGE_ME", "REPLACE_ME")


def is_placeholder(value) -> bool:
    """True if a configuration value is empty or still a template placeholder."""
    if value is None:
        return True
    text = str(value).strip()
    if not text:
        return True
    upper = text.upper()
    return any(upper.startswith(marker) for marker in PLACEHOLDER_MARKERS)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # App
    app_name: str = os.getenv("APP_NAME", "Camstream Media Proxy")
    app_env: str = os.getenv("APP_ENV", "development")
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_to_file: bool = os.getenv("LOG_TO_FILE", "False").lower() == "true"

    # API
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    cors_origins: List[str] = Field(default=["*"])

    # Vendor media API (proxy-facing only)
    media_api_base_url: str = os.getenv("MEDIA_API_BASE_URL", "https://api2.rhombussystems.com")
    media_api_key: str = os.getenv("MEDIA_API_KEY", "")
    media_api_token_path: str = os.getenv("MEDIA_API_TOKEN_PATH", "/api/org/generateFederatedSessionToken")
    media_api_uris_path: str = os.getenv("MEDIA_API_URIS_PATH", "/api/camera/getMediaUris")
    media_api_timeout: float = float(os.getenv("MEDIA_API_TIMEOUT", "10"))

    # Playback client
    proxy_base_url: str = os.getenv("PROXY_BASE_URL", "http://localhost:8000")
    camera_id: str = os.getenv("CAMERA_ID", "")
    token_duration_sec: int = int(os.getenv("TOKEN_DURATION_SEC", "86400"))
    token_refresh_enabled: bool = os.getenv("TOKEN_REFRESH_ENABLED", "False").lower() == "true"
    token_refresh_margin_sec: int = int(os.getenv("TOKEN_REFRESH_MARGIN_SEC", "300"))
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "10"))

    # Player tuning (dash.js)
    player_stable_buffer_time: float = float(os.getenv("PLAYER_STABLE_BUFFER_TIME", "4"))
    player_buffer_time_at_top_quality: float = float(os.getenv("PLAYER_BUFFER_TIME_AT_TOP_QUALITY", "4"))
    player_live_delay: float = float(os.getenv("PLAYER_LIVE_DELAY", "3"))
    player_catchup_max_drift: float = float(os.getenv("PLAYER_CATCHUP_MAX_DRIFT", "5"))
    player_catchup_playback_rate: float = float(os.getenv("PLAYER_CATCHUP_PLAYBACK_RATE", "0.5"))
    dashjs_script_url: str = os.getenv("DASHJS_SCRIPT_URL", "https://cdn.dashjs.org/v4.7.4/dash.all.min.js")

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = False
        extra = "allow"  # Allow extra fields from .env


# Global settings instance
settings = Settings()

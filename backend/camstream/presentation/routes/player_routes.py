from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from ...application.token_refresher import refresh_interval
from ...core.config import settings, is_placeholder
from ...domain.entities import PlayerSettings
from ..templates import get_player_html

router = APIRouter(
    tags=["Player"],
)


@router.get("/player", response_class=HTMLResponse)
async def player_page(camera: Optional[str] = Query(default=None)):
    """
    Browser page that plays one camera with dash.js.

    Uses ?camera=<id>, falling back to the configured camera.
    """
    camera_id = camera or settings.camera_id
    if is_placeholder(camera_id):
        camera_id = None

    interval = 0.0
    if settings.token_refresh_enabled:
        interval = refresh_interval(settings.token_duration_sec, settings.token_refresh_margin_sec)

    return get_player_html(
        camera_id=camera_id,
        player_settings=PlayerSettings.from_config(settings).to_dashjs(),
        duration_sec=settings.token_duration_sec,
        refresh_interval_sec=interval,
        dashjs_url=settings.dashjs_script_url,
    )

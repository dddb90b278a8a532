"""HTML for the browser playback page."""

import json
from string import Template
from typing import Any, Dict, Optional

_PLAYER_PAGE = Template('''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Live Camera</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            background: #0f0f1a;
            min-height: 100vh;
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            color: #fff;
        }
        .container { max-width: 1280px; margin: 0 auto; padding: 10px; }
        video { width: 100%; background: #000; border-radius: 8px; }
        .status { margin-top: 8px; font-size: 14px; color: #9ca3af; }
        .status.error { color: #ef4444; }
    </style>
    <script src="$dashjs_url"></script>
</head>
<body>
<div class="container">
    <video id="video" muted autoplay playsinline controls></video>
    <div id="status" class="status">Starting...</div>
</div>
<script>
const CONFIG = $config;
let player = null;
let refreshTimer = null;

function setStatus(text, isError) {
    const el = document.getElementById("status");
    el.textContent = text;
    el.className = isError ? "status error" : "status";
}

function appendFederatedToken(url, token) {
    const query = "x-auth-scheme=federated-token&x-auth-ft=" + encodeURIComponent(token);
    const hashAt = url.indexOf("#");
    const base = hashAt === -1 ? url : url.slice(0, hashAt);
    const fragment = hashAt === -1 ? "" : url.slice(hashAt);
    let joiner = "&";
    if (base.indexOf("?") === -1) {
        joiner = "?";
    } else if (base.endsWith("?") || base.endsWith("&")) {
        joiner = "";
    }
    return base + joiner + query + fragment;
}

async function postJson(path, body) {
    const response = await fetch(path, {
        method: "POST",
        headers: {"Content-Type": "application/json"},
        body: JSON.stringify(body)
    });
    if (!response.ok) {
        throw new Error(path + " returned HTTP " + response.status);
    }
    return response.json();
}

async function acquireToken() {
    const body = await postJson(CONFIG.tokenEndpoint, {durationSec: CONFIG.durationSec});
    if (!body.federatedSessionToken) {
        throw new Error("Token response has no federatedSessionToken");
    }
    return body.federatedSessionToken;
}

async function resolveManifestUrl(cameraId) {
    const body = await postJson(CONFIG.mediaUrisEndpoint, {cameraUuid: cameraId});
    return body.wanLiveMpdUri;
}

function startPlayer(manifestUrl, token) {
    if (player) {
        player.reset();
    }
    player = dashjs.MediaPlayer().create();
    player.extend("RequestModifier", function () {
        return {
            modifyRequestHeader: function (xhr) { return xhr; },
            modifyRequestURL: function (url) { return appendFederatedToken(url, token); }
        };
    }, true);
    player.updateSettings(CONFIG.playerSettings);
    player.initialize(document.getElementById("video"), manifestUrl, true);
}

async function start() {
    if (!CONFIG.cameraId) {
        setStatus("Camera id is not configured; pass ?camera=<id>", true);
        return;
    }
    try {
        const token = await acquireToken();
        const manifestUrl = await resolveManifestUrl(CONFIG.cameraId);
        startPlayer(manifestUrl, token);
        setStatus("Live: " + CONFIG.cameraId, false);

        if (CONFIG.refreshIntervalSec > 0) {
            refreshTimer = setInterval(async function () {
                try {
                    startPlayer(manifestUrl, await acquireToken());
                } catch (err) {
                    clearInterval(refreshTimer);
                    setStatus("Token refresh failed: " + err.message, true);
                }
            }, CONFIG.refreshIntervalSec * 1000);
        }
    } catch (err) {
        setStatus("Startup failed: " + err.message, true);
    }
}

start();
</script>
</body>
</html>
''')


def _script_json(value: Any) -> str:
    # Keep embedded JSON from closing the script element
    return json.dumps(value).replace("</", "<\\/")


def get_player_html(
    camera_id: Optional[str],
    player_settings: Dict[str, Any],
    duration_sec: int,
    refresh_interval_sec: float,
    dashjs_url: str,
    token_endpoint: str = "/api/federated-token",
    media_uris_endpoint: str = "/api/media-uris",
) -> str:
    """Return the HTML for the dash.js playback page."""
    config = {
        "cameraId": camera_id or "",
        "durationSec": duration_sec,
        "refreshIntervalSec": refresh_interval_sec,
        "tokenEndpoint": token_endpoint,
        "mediaUrisEndpoint": media_uris_endpoint,
        "playerSettings": player_settings,
    }
    return _PLAYER_PAGE.substitute(
        dashjs_url=dashjs_url.replace('"', "%22"),
        config=_script_json(config),
    )

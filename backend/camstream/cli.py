"""
Headless live playback

Runs the startup sequence against the proxy (token, media URI, player)
and keeps the session alive until CTRL+C, refreshing the token if enabled.

Usage:
    camstream-play --camera-id <uuid> --proxy-url http://localhost:8000
"""

import argparse
import asyncio
import logging
import sys

from camstream.application import StartLiveStreamUseCase, TokenRefresher
from camstream.core.config import settings
from camstream.core.exceptions import MissingConfigurationError, StreamSetupError
from camstream.core.logger import setup_logging
from camstream.domain.entities import PlayerSettings
from camstream.infrastructure.player import ManifestPlayer
from camstream.infrastructure.proxy import ProxyClient

logger = logging.getLogger("camstream.cli")

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_CONFIG_MISSING = 2

POLL_INTERVAL_SEC = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a live camera stream through the media proxy")
    parser.add_argument("--camera-id", default=settings.camera_id, help="Camera identifier (default: CAMERA_ID)")
    parser.add_argument("--proxy-url", default=settings.proxy_base_url, help="Proxy base URL (default: PROXY_BASE_URL)")
    parser.add_argument("--duration", type=int, default=settings.token_duration_sec, help="Token validity in seconds")
    parser.add_argument("--refresh", action="store_true", default=settings.token_refresh_enabled,
                        help="Refresh the token before it expires")
    parser.add_argument("--once", action="store_true", help="Exit after playback starts")
    return parser


async def play(args: argparse.Namespace) -> int:
    player_settings = PlayerSettings.from_config(settings)
    player = ManifestPlayer(timeout=settings.request_timeout)
    refresher = None

    async with ProxyClient(base_url=args.proxy_url) as proxy_client:
        use_case = StartLiveStreamUseCase(
            proxy_client=proxy_client,
            player=player,
            player_settings=player_settings,
            token_duration_sec=args.duration,
        )
        try:
            session = await use_case.execute(args.camera_id)
        except MissingConfigurationError as e:
            logger.error(str(e))
            await player.close()
            return EXIT_CONFIG_MISSING
        except StreamSetupError:
            await player.close()
            return EXIT_FETCH_FAILED

        print(f"Playing {session.camera_id}: {session.manifest_url}")

        try:
            if args.once:
                return EXIT_OK

            if args.refresh:
                refresher = TokenRefresher(
                    session=session,
                    proxy_client=proxy_client,
                    player=player,
                    player_settings=player_settings,
                    duration_sec=args.duration,
                    margin_sec=settings.token_refresh_margin_sec,
                )
                await refresher.start()

            while session.is_active():
                await asyncio.sleep(POLL_INTERVAL_SEC)

            return EXIT_FETCH_FAILED
        finally:
            if refresher:
                await refresher.stop()
            if session.is_active():
                session.stop()
            await player.close()
            logger.info(f"[{session.camera_id}] Session ended after {session.get_duration() or 0:.0f}s")


def main(argv=None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(play(args))
    except KeyboardInterrupt:
        print("\nShutting down...")
        return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

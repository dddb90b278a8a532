"""
FastAPI Application Entry Point

Media proxy: shields the vendor API key and serves the playback page.
"""
import logging
import time
from contextlib import asynccontextmanager

from camstream.core.logger import setup_logging
setup_logging()
logger = logging.getLogger(__name__)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from camstream.core.config import settings
from camstream.infrastructure.media_api import get_media_api_client
from camstream.presentation.routes import proxy_router, player_router

startup_time: float = 0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup/shutdown."""

    # Startup
    await startup(app)

    yield

    # Shutdown
    await shutdown()


async def startup(app: FastAPI) -> None:
    """Initialize application on startup."""
    global startup_time

    startup_time = time.time()

    try:
        # Halts startup when MEDIA_API_KEY is unset or a placeholder
        media_api_client = get_media_api_client()
        await media_api_client.connect()
        app.state.media_api_client = media_api_client

        elapsed = time.time() - startup_time
        logger.info(f"Media proxy started in {elapsed:.1f}s | upstream: {media_api_client.base_url}")

    except Exception as e:
        logger.error(f"Startup error: {str(e)}", exc_info=True)
        raise


async def shutdown() -> None:
    """Clean up on shutdown."""
    try:
        await get_media_api_client().disconnect()
        logger.info("Media proxy stopped")
    except Exception as e:
        logger.error(f"Shutdown error: {str(e)}", exc_info=True)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Credential-shielding proxy for live camera streaming",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(proxy_router)
app.include_router(player_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": settings.app_name,
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check for monitoring"""
    media_api_client = get_media_api_client()

    return {
        "message": settings.app_name,
        "version": "1.0.0",
        "status": "running",
        "uptime_seconds": time.time() - startup_time if startup_time else 0,
        "media_api": media_api_client.get_stats(),
    }


def run() -> None:
    import uvicorn
    uvicorn.run(
        "camstream.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info"
    )


if __name__ == "__main__":
    run()

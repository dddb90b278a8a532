"""Application Use Cases"""
from .start_live_stream import StartLiveStreamUseCase, require_configured

__all__ = ["StartLiveStreamUseCase", "require_configured"]

"""Domain Interfaces - Abstract contracts for external components"""
from .stream_player import IStreamPlayer, RequestModifier

__all__ = ["IStreamPlayer", "RequestModifier"]

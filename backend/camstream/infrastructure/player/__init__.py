"""Player implementations."""
from .manifest_player import ManifestPlayer

__all__ = ["ManifestPlayer"]

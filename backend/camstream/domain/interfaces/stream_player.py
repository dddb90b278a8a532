"""Stream Player Interface"""
from abc import ABC, abstractmethod
from typing import Callable

from ..entities import PlayerSettings

RequestModifier = Callable[[str], str]


class IStreamPlayer(ABC):
    """
    Stream Player Interface

    Abstract contract for a DASH player. The request modifier is applied
    to every URL the player fetches, manifest included.
    """

    @abstractmethod
    async def initialize(
        self,
        manifest_url: str,
        request_modifier: RequestModifier,
        settings: PlayerSettings,
    ) -> None:
        """Configure the player and start playback"""
        pass

    @abstractmethod
    async def reset(self) -> None:
        """Tear down playback; the player can be initialized again"""
        pass

    @property
    @abstractmethod
    def is_playing(self) -> bool:
        """Whether playback is running"""
        pass

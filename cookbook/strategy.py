"""Animal sounds via interchangeable strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SoundStrategy(ABC):
    """How an animal makes its sound."""

    @abstractmethod
    def make_sound(self) -> str:
        ...


class BarkStrategy(SoundStrategy):
    def make_sound(self) -> str:
        return "woof"


class MeowStrategy(SoundStrategy):
    def make_sound(self) -> str:
        return "meow"


class Animal:
    """Delegates its sound to the strategy it was built with."""

    def __init__(self, sound_strategy: SoundStrategy):
        self._sound_strategy = sound_strategy

    def make_sound(self) -> str:
        return self._sound_strategy.make_sound()

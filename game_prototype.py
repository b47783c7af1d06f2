# game_prototype.py
from __future__ import annotations

import copy
import logging
from typing import TextIO

from validators import Validator

logger = logging.getLogger(__name__)


class GameCharacter:
    """Prototype: new characters are cloned from a configured instance."""

    default_weapon: str = ""
    default_health: int = 0

    def __init__(self, weapon: str | None = None, health: int | None = None) -> None:
        self.weapon = Validator.require_non_empty(
            "weapon", self.default_weapon if weapon is None else weapon
        )
        self.health = Validator.positive_int(
            "health", self.default_health if health is None else health
        )

    def clone(self) -> GameCharacter:
        return copy.deepcopy(self)

    def describe(self) -> str:
        return f"{type(self).__name__} with {self.weapon}, Health: {self.health}"

    def display(self, *, stream: TextIO | None = None) -> None:
        print(self.describe(), file=stream)


class Orc(GameCharacter):
    default_weapon = "Axe"
    default_health = 100


class Troll(GameCharacter):
    default_weapon = "Club"
    default_health = 150


class CharacterRegistry:
    """
    Lookup table of prototypes. Create one and pass it around;
    there is no module-level instance.
    """

    def __init__(self) -> None:
        self._prototypes: dict[str, GameCharacter] = {}

    def add_prototype(self, key: str, prototype: GameCharacter) -> None:
        key = Validator.require_non_empty("key", key)
        self._prototypes[key] = prototype
        logger.debug("Prototype '%s' registered: %s", key, prototype.describe())

    def get_prototype(self, key: str) -> GameCharacter:
        """Returns a fresh clone; unknown keys raise KeyError."""
        try:
            prototype = self._prototypes[key]
        except KeyError:
            raise KeyError(f"No prototype registered under '{key}'") from None
        return prototype.clone()

    def keys(self) -> list[str]:
        return list(self._prototypes)

    def __contains__(self, key: object) -> bool:
        return key in self._prototypes

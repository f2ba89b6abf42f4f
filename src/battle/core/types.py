from enum import Enum, IntEnum
from typing import Optional

# Ability identifiers are the display names used in card data, e.g. "Flying".
Ability = str


class TeamNumber(IntEnum):
    """Which side of the battle a card is fighting for."""

    UNKNOWN = 0
    ONE = 1
    TWO = 2


class CardType(str, Enum):
    """Declared role of a card definition."""

    MONSTER = "Monster"
    SUMMONER = "Summoner"

    @classmethod
    def from_raw(cls, value: object) -> Optional["CardType"]:
        """Maps a raw `type` field to a CardType, or None if unrecognised."""
        for member in cls:
            if isinstance(value, str) and value.strip().lower() == member.value.lower():
                return member
        return None

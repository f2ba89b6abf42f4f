from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from src.battle.card.card_stats import CardStats
from src.battle.core.types import CardType


@dataclass(frozen=True)
class CardDetail:
    """Represents the static, immutable data for a card, loaded from JSON."""

    id: int
    name: str
    rarity: int
    color: str = "Gray"
    type: Optional[CardType] = None
    stats: CardStats = field(default_factory=CardStats)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "CardDetail":
        """
        Builds a CardDetail from a raw card record.

        Raises:
            KeyError: If the record has no `id`.
            TypeError, ValueError: If a field has the wrong shape.
        """
        card_type = CardType.from_raw(record.get("type"))
        return cls(
            id=int(record["id"]),
            name=str(record.get("name", "Unknown")),
            rarity=int(record.get("rarity", 1)),
            color=str(record.get("color", "Gray")),
            type=card_type,
            stats=CardStats.from_dict(record.get("stats") or {}, card_type),
        )

    @property
    def max_level(self) -> Optional[int]:
        return self.stats.max_level

    @property
    def is_summoner(self) -> bool:
        return self.type is CardType.SUMMONER

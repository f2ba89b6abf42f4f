from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple, Union

from src.battle.core.types import Ability, CardType

Number = Union[int, float]


@dataclass(frozen=True)
class ConstantStat:
    """A stat that has the same value at every level."""

    value: Number = 0

    def resolve(self, level: int) -> Number:
        return self.value

    @property
    def level_count(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class LeveledStat:
    """A stat with one entry per card level, indexed by the zero-based level."""

    values: Tuple[Number, ...] = ()

    def resolve(self, level: int) -> Number:
        # No clamping: an out-of-range level surfaces as IndexError.
        return self.values[level]

    @property
    def level_count(self) -> Optional[int]:
        return len(self.values)


StatValue = Union[ConstantStat, LeveledStat]


@dataclass(frozen=True)
class FlatAbilities:
    """Abilities granted in full regardless of level (summoners)."""

    abilities: Tuple[Ability, ...] = ()

    def aggregate(self, level: int) -> FrozenSet[Ability]:
        return frozenset(self.abilities)


@dataclass(frozen=True)
class TieredAbilities:
    """
    Abilities unlocked tier by tier (monsters). Tier `i` holds the abilities
    gained at zero-based level `i`; a card at level `n` has every ability of
    tiers 0 through `n`.
    """

    tiers: Tuple[Tuple[Ability, ...], ...] = ()

    def aggregate(self, level: int) -> FrozenSet[Ability]:
        return frozenset(
            ability for tier in self.tiers[: level + 1] for ability in tier
        )


AbilityTable = Union[FlatAbilities, TieredAbilities]


def parse_stat_value(raw: Any) -> StatValue:
    """Converts a raw scalar or per-level list into a StatValue."""
    if raw is None:
        return ConstantStat()
    if isinstance(raw, (list, tuple)):
        return LeveledStat(tuple(raw))
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return ConstantStat(raw)
    raise TypeError(f"Stat must be a number or a list of numbers, got {raw!r}.")


def _parse_flat_abilities(raw: Sequence[Any]) -> FlatAbilities:
    for ability in raw:
        if not isinstance(ability, str):
            raise TypeError(
                f"Flat abilities must be a list of names, got entry {ability!r}."
            )
    return FlatAbilities(tuple(raw))


def _parse_tiered_abilities(raw: Sequence[Any]) -> TieredAbilities:
    tiers = []
    for tier in raw:
        if not isinstance(tier, (list, tuple)):
            raise TypeError(
                f"Tiered abilities must be a list of lists, got tier {tier!r}."
            )
        tiers.append(_parse_flat_abilities(tier).abilities)
    return TieredAbilities(tuple(tiers))


def parse_ability_table(
    raw: Any, card_type: Optional[CardType]
) -> Optional[AbilityTable]:
    """
    Converts a raw abilities field into a FlatAbilities or TieredAbilities.

    The variant is chosen from the declared card type. Records without a
    recognised type fall back to the shape of the first entry.

    Raises:
        TypeError: If the entries do not match the chosen variant, e.g. a
                   monster with a flat list or a summoner with tiers.
    """
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)):
        raise TypeError(f"Abilities must be a list, got {raw!r}.")

    if card_type is CardType.SUMMONER:
        return _parse_flat_abilities(raw)
    if card_type is CardType.MONSTER:
        return _parse_tiered_abilities(raw)

    if raw and isinstance(raw[0], (list, tuple)):
        return _parse_tiered_abilities(raw)
    return _parse_flat_abilities(raw)


@dataclass(frozen=True)
class CardStats:
    """Holds the per-level stat tables and abilities of a card definition."""

    speed: StatValue = field(default_factory=ConstantStat)
    armor: StatValue = field(default_factory=ConstantStat)
    health: StatValue = field(default_factory=ConstantStat)
    magic: StatValue = field(default_factory=ConstantStat)
    attack: StatValue = field(default_factory=ConstantStat)
    ranged: StatValue = field(default_factory=ConstantStat)
    mana: StatValue = field(default_factory=ConstantStat)
    abilities: Optional[AbilityTable] = None

    STAT_NAMES = ("speed", "armor", "health", "magic", "attack", "ranged", "mana")

    @classmethod
    def from_dict(
        cls, raw: dict, card_type: Optional[CardType] = None
    ) -> "CardStats":
        """Builds CardStats from a raw `stats` mapping."""
        stat_values = {name: parse_stat_value(raw.get(name)) for name in cls.STAT_NAMES}
        return cls(
            **stat_values,
            abilities=parse_ability_table(raw.get("abilities"), card_type),
        )

    def stat_values(self) -> List[StatValue]:
        return [getattr(self, name) for name in self.STAT_NAMES]

    @property
    def max_level(self) -> Optional[int]:
        """
        The highest 1-based level every leveled stat can resolve, or None when
        all stats are constant.
        """
        counts = [
            stat.level_count for stat in self.stat_values() if stat.level_count is not None
        ]
        return min(counts) if counts else None

import logging
from typing import Dict, Mapping, Optional, Set, TypeVar, Union

from src.battle.card.card_detail import CardDetail
from src.battle.card.card_library import CardLibrary, get_default_library
from src.battle.card.card_stats import CardStats
from src.battle.core.battle_config import BattleConfig
from src.battle.core.types import Ability, TeamNumber

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CardLevelError(IndexError):
    """Raised in strict mode when a card is requested beyond its level range."""


class GameCard:
    """
    Represents one card taking part in a battle. Stats and abilities are
    resolved from the card's static detail for a given level when the card is
    created; afterwards the battle engine mutates the live values directly.
    """

    def __init__(
        self,
        card_detail: Union[CardDetail, int],
        card_level: int,
        card_library: Optional[CardLibrary] = None,
        config: Optional[BattleConfig] = None,
    ):
        """
        Args:
            card_detail: A resolved CardDetail, or a card id to look up.
            card_level: The 1-based card level.
            card_library: Library used to resolve a card id. Defaults to the
                          process-wide library.
            config: Battle configuration. Defaults to BattleConfig().

        Raises:
            CardNotFoundError: If a card id is not in the library.
            ValueError: If card_level is below 1.
            CardLevelError: In strict mode, if card_level exceeds the card's
                            leveled stats.
        """
        self._config: BattleConfig = config or BattleConfig()
        self._card_library = card_library

        if isinstance(card_detail, CardDetail):
            self._card_detail: CardDetail = card_detail
        else:
            library = card_library or get_default_library(self._config)
            self._card_detail = library.get_card_detail(card_detail)

        if card_level < 1:
            raise ValueError(f"Card level must be 1 or greater, got {card_level}.")
        self._check_level_range(card_level)
        self._card_level: int = card_level - 1

        self._team: TeamNumber = TeamNumber.UNKNOWN
        self._buffs: Dict[Ability, float] = {}
        self._debuffs: Dict[Ability, float] = {}
        self.abilities: Set[Ability] = set()

        self.speed = 0
        self.armor = 0
        self.health = 0
        self.magic = 0
        self.melee = 0
        self.ranged = 0
        self.mana = 0
        self._starting_armor = 0
        self._starting_health = 0

        self._set_stats(self._card_detail.stats)
        logger.debug(
            "Created %s at level %d with abilities %s",
            self._card_detail.name,
            card_level,
            sorted(self.abilities),
        )

    def _check_level_range(self, card_level: int) -> None:
        if not self._config.strict_levels:
            return
        max_level = self._card_detail.max_level
        if max_level is not None and card_level > max_level:
            raise CardLevelError(
                f"Level {card_level} is out of range for {self._card_detail.name} "
                f"(ID {self._card_detail.id}), max level is {max_level}."
            )

    def _set_stats(self, stats: CardStats) -> None:
        level = self._card_level
        self.speed = stats.speed.resolve(level)
        self.armor = stats.armor.resolve(level)
        self._starting_armor = self.armor
        self.health = stats.health.resolve(level)
        self._starting_health = self.health
        self.magic = stats.magic.resolve(level)
        self.ranged = stats.ranged.resolve(level)
        self.melee = stats.attack.resolve(level)
        self.mana = stats.mana.resolve(level)
        if stats.abilities is not None:
            self.abilities.update(stats.abilities.aggregate(level))

    @property
    def starting_armor(self):
        """Armor as resolved at creation, before any battle effects."""
        return self._starting_armor

    @property
    def starting_health(self):
        """Health as resolved at creation, before any battle effects."""
        return self._starting_health

    def set_team(self, team_number: TeamNumber) -> None:
        self._team = TeamNumber(team_number)

    def get_team_number(self) -> TeamNumber:
        return self._team

    def set_game_team(self, team_number: TeamNumber) -> None:
        """Alias of set_team; the card only records which side it belongs to."""
        self.set_team(team_number)

    def get_game_team(self, teams: Mapping[TeamNumber, T]) -> Optional[T]:
        """Looks up this card's team object in a caller-owned mapping."""
        return teams.get(self._team)

    def get_card_detail(self) -> CardDetail:
        return self._card_detail

    def get_card_level(self) -> int:
        """Returns the card level (0 indexed)."""
        return self._card_level

    def get_level(self) -> int:
        return self._card_level

    def get_rarity(self) -> int:
        return self._card_detail.rarity

    def get_name(self) -> str:
        return self._card_detail.name

    def has_ability(self, ability: Ability) -> bool:
        return ability in self.abilities

    def remove_ability(self, ability: Ability) -> None:
        self.abilities.discard(ability)

    def get_buffs(self) -> Dict[Ability, float]:
        return self._buffs

    def get_debuffs(self) -> Dict[Ability, float]:
        return self._debuffs

    def get_clean_card(self) -> "GameCard":
        """Returns a fresh card of the same detail and level, without battle effects."""
        return GameCard(
            self._card_detail, self._card_level + 1, self._card_library, self._config
        )

    def clone(self) -> "GameCard":
        """Returns a copy of the current battle state that shares no containers."""
        cloned_card = self.get_clean_card()
        cloned_card.abilities = set(self.abilities)
        cloned_card.speed = self.speed
        cloned_card._starting_armor = self._starting_armor
        cloned_card.armor = self.armor
        cloned_card._starting_health = self._starting_health
        cloned_card.health = self.health
        cloned_card.magic = self.magic
        cloned_card.melee = self.melee
        cloned_card.ranged = self.ranged
        cloned_card.mana = self.mana
        cloned_card._buffs = dict(self._buffs)
        cloned_card._debuffs = dict(self._debuffs)
        cloned_card.set_team(self._team)
        return cloned_card

    def __repr__(self) -> str:
        """Provides a multi-line summary of the card's current battle state."""
        detail = self._card_detail
        header = f"<GameCard id={detail.id} name='{detail.name}' rarity={detail.rarity}>"
        info = f"  - Info: Level={self._card_level + 1}, Team={self._team.name}"
        stats_line = (
            f"  - Stats: Speed={self.speed}, Armor={self.armor}/{self._starting_armor}, "
            f"Health={self.health}/{self._starting_health}, Mana={self.mana}"
        )
        attack_line = (
            f"  - Attack (Melee/Ranged/Magic): {self.melee}/{self.ranged}/{self.magic}"
        )
        lines = [header, info, stats_line, attack_line]
        if self.abilities:
            lines.append(f"  - Abilities: {', '.join(sorted(self.abilities))}")
        if self._buffs:
            lines.append(f"  - Buffs: {self._format_modifiers(self._buffs)}")
        if self._debuffs:
            lines.append(f"  - Debuffs: {self._format_modifiers(self._debuffs)}")
        return "\n".join(lines)

    @staticmethod
    def _format_modifiers(modifiers: Dict[Ability, float]) -> str:
        return ", ".join(f"{name}={value}" for name, value in sorted(modifiers.items()))

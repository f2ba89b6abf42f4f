from .card_detail import CardDetail
from .card_library import (
    CardLibrary,
    CardNotFoundError,
    get_default_library,
    set_default_library,
)
from .card_serializer import CardSerializer
from .card_stats import (
    CardStats,
    ConstantStat,
    FlatAbilities,
    LeveledStat,
    TieredAbilities,
)
from .game_card import CardLevelError, GameCard

__all__ = [
    "CardDetail",
    "CardLevelError",
    "CardLibrary",
    "CardNotFoundError",
    "CardSerializer",
    "CardStats",
    "ConstantStat",
    "FlatAbilities",
    "GameCard",
    "LeveledStat",
    "TieredAbilities",
    "get_default_library",
    "set_default_library",
]

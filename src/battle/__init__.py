from .card.card_detail import CardDetail
from .card.card_library import CardLibrary, CardNotFoundError
from .card.card_serializer import CardSerializer
from .card.game_card import CardLevelError, GameCard
from .core.battle_config import BattleConfig
from .core.logging_setup import setup_logger
from .core.types import Ability, CardType, TeamNumber

__all__ = [
    "Ability",
    "BattleConfig",
    "CardDetail",
    "CardLevelError",
    "CardLibrary",
    "CardNotFoundError",
    "CardSerializer",
    "CardType",
    "GameCard",
    "TeamNumber",
    "setup_logger",
]

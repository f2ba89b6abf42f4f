from .battle_config import BattleConfig
from .logging_setup import setup_logger
from .types import Ability, CardType, TeamNumber

__all__ = [
    "Ability",
    "BattleConfig",
    "CardType",
    "TeamNumber",
    "setup_logger",
]

import logging
import sys

from src.battle.core.battle_config import BattleConfig

PACKAGE_LOGGER_NAME = "src.battle"


def setup_logger(config: BattleConfig) -> logging.Logger:
    """Configures the package logger according to the battle config."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if logger.hasHandlers():
        logger.handlers.clear()

    if not config.enable_logging:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    logger.setLevel(config.log_level)
    logger.propagate = False

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(stream_handler)

    return logger

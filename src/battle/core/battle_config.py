"""
This module defines the configuration shared by card construction and the
default card library.
"""

from dataclasses import dataclass

_VALID_LOG_LEVELS = (0, 10, 20, 30, 40, 50)


@dataclass(frozen=True)
class BattleConfig:
    """
    Holds the user-defined parameters for building battle cards.

    Attributes:
        cards_json_path (str): Path to the JSON file of card details used by
                               the default card library.
                               Relative paths are resolved against the
                               current working directory, and the data
                               directory is not installed with the
                               package, so pass an absolute path when
                               running outside the repository root.
                               Defaults to "data/cards.json".
        strict_levels (bool): When True, constructing a card at a level beyond
                              the range of its leveled stats raises
                              CardLevelError up front instead of letting the
                              index lookup fail. Defaults to False.
        enable_logging (bool): Whether to emit debug logs to stderr.
                               Defaults to False.
        log_level (int): The logging level to use when logging is enabled.
                         Defaults to logging.INFO.
    """

    cards_json_path: str = "data/cards.json"
    strict_levels: bool = False
    enable_logging: bool = False
    log_level: int = 20

    def __post_init__(self):
        """Validate parameters after initialization."""
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {_VALID_LOG_LEVELS}, got {self.log_level}."
            )
        if not self.cards_json_path:
            raise ValueError("cards_json_path must be a non-empty path.")

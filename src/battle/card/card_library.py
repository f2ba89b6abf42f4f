"""
This module defines the CardLibrary, the lookup service that maps a card id to
its static CardDetail, together with a lazily created process-wide default.
"""

import json
import logging
import warnings
from typing import Any, Dict, Iterable, List, Optional

from src.battle.card.card_detail import CardDetail
from src.battle.core.battle_config import BattleConfig

logger = logging.getLogger(__name__)


class CardNotFoundError(KeyError):
    """Raised when a card id has no entry in the library."""

    def __init__(self, card_id: Any):
        super().__init__(card_id)
        self.card_id = card_id

    def __str__(self) -> str:
        return f"Card with ID {self.card_id} not found."


class CardLibrary:
    """Handles loading card details from JSON and looking them up by id."""

    def __init__(self, cards_json_path: Optional[str] = None):
        self._card_detail_map: Dict[int, CardDetail] = {}
        if cards_json_path is None:
            return

        raw_data = self._load_json(cards_json_path)
        if not isinstance(raw_data, list):
            raise TypeError("Card data file must be a list of objects.")
        self._card_detail_map = self._index_card_details(raw_data)
        logger.debug(
            "Loaded %d card details from %s", len(self._card_detail_map), cards_json_path
        )

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "CardLibrary":
        """Builds a library from in-memory raw card records."""
        library = cls()
        library._card_detail_map = library._index_card_details(list(records))
        return library

    def _load_json(self, json_path: str) -> Any:
        """Helper to load and parse a JSON file."""
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            raise RuntimeError(
                f"Failed to load or parse JSON from {json_path}: {e}"
            ) from e

    def _index_card_details(self, raw_data: List[Dict[str, Any]]) -> Dict[int, CardDetail]:
        """Converts the raw list of records into a map of CardDetail objects."""
        indexed_map = {}
        for record in raw_data:
            try:
                card_detail = CardDetail.from_dict(record)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                warnings.warn(f"Skipping invalid card record: {record}. Error: {e}")
                continue
            indexed_map[card_detail.id] = card_detail
        return indexed_map

    def get_card_detail(self, card_id: int) -> CardDetail:
        """
        Returns the CardDetail for a card id.

        Raises:
            CardNotFoundError: If the id is unknown.
        """
        try:
            return self._card_detail_map[card_id]
        except KeyError:
            raise CardNotFoundError(card_id) from None

    def card_ids(self) -> List[int]:
        return sorted(self._card_detail_map)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._card_detail_map

    def __len__(self) -> int:
        return len(self._card_detail_map)

    def __repr__(self) -> str:
        return f"<CardLibrary cards={len(self)}>"


_default_library: Optional[CardLibrary] = None


def get_default_library(config: Optional[BattleConfig] = None) -> CardLibrary:
    """
    Returns the process-wide library, loading it from the configured
    cards_json_path on first use.
    """
    global _default_library
    if _default_library is None:
        config = config or BattleConfig()
        _default_library = CardLibrary(config.cards_json_path)
    return _default_library


def set_default_library(library: Optional[CardLibrary]) -> None:
    """Replaces the process-wide library. Passing None forces a reload on next use."""
    global _default_library
    _default_library = library

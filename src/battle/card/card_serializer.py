from __future__ import annotations
from typing import Dict, Mapping, Sequence

import numpy as np

from src.battle.card.game_card import GameCard
from src.battle.core.types import Ability


class CardSerializer:
    """
    Handles the serialization of battle cards into feature vectors for
    search or learning agents that evaluate simulation branches.
    """

    STAT_FIELDS = ("speed", "armor", "health", "magic", "melee", "ranged", "mana")

    def __init__(self, ability_vocabulary: Sequence[Ability]):
        """
        Initializes the serializer.

        Args:
            ability_vocabulary: The abilities to encode, in feature order.
                                Abilities outside the vocabulary are ignored.
        """
        self.ability_index: Dict[Ability, int] = {}
        for ability in ability_vocabulary:
            self.ability_index.setdefault(ability, len(self.ability_index))
        self.card_feature_size = self._calculate_card_feature_size()

    def _calculate_card_feature_size(self) -> int:
        """Calculates the size of the feature vector for a single card."""
        parts = [
            1,  # Rarity
            len(self.STAT_FIELDS),  # Live stats
            2,  # Starting armor, starting health
            len(self.ability_index),  # Abilities (multi-hot)
            len(self.ability_index),  # Buff magnitudes
            len(self.ability_index),  # Debuff magnitudes
        ]
        return sum(parts)

    def serialize_card(self, card: GameCard) -> np.ndarray:
        """Serializes a single card into a float32 feature vector."""
        features = [
            np.array([card.get_rarity()], dtype=np.float32),
            np.array(
                [getattr(card, name) for name in self.STAT_FIELDS], dtype=np.float32
            ),
            np.array([card.starting_armor, card.starting_health], dtype=np.float32),
            self.get_multi_hot_vector(card.abilities),
            self.get_magnitude_vector(card.get_buffs()),
            self.get_magnitude_vector(card.get_debuffs()),
        ]
        return np.concatenate(features)

    def serialize_cards(self, cards: Sequence[GameCard]) -> np.ndarray:
        """Stacks card feature vectors into a 2-D array, one row per card."""
        if not cards:
            return np.zeros((0, self.card_feature_size), dtype=np.float32)
        return np.stack([self.serialize_card(card) for card in cards])

    def get_multi_hot_vector(self, abilities) -> np.ndarray:
        vector = np.zeros(len(self.ability_index), dtype=np.float32)
        for ability in abilities:
            index = self.ability_index.get(ability)
            if index is not None:
                vector[index] = 1.0
        return vector

    def get_magnitude_vector(self, modifiers: Mapping[Ability, float]) -> np.ndarray:
        vector = np.zeros(len(self.ability_index), dtype=np.float32)
        for ability, magnitude in modifiers.items():
            index = self.ability_index.get(ability)
            if index is not None:
                vector[index] = magnitude
        return vector

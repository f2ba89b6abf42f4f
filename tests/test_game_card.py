import os
import unittest

from src.battle.card.card_detail import CardDetail
from src.battle.card.card_library import (
    CardLibrary,
    CardNotFoundError,
    set_default_library,
)
from src.battle.card.game_card import CardLevelError, GameCard
from src.battle.core.battle_config import BattleConfig
from src.battle.core.types import TeamNumber


class TestGameCard(unittest.TestCase):
    """Unit tests for stat resolution, ability aggregation and cloning."""

    @classmethod
    def setUpClass(cls):
        cls.test_data_dir = os.path.join(os.path.dirname(__file__), "test_data")
        cls.library = CardLibrary(os.path.join(cls.test_data_dir, "cards.json"))

    def setUp(self):
        self.growth_detail = self.library.get_card_detail(1)

    def tearDown(self):
        set_default_library(None)

    def test_level_one_resolution(self):
        card = GameCard(self.growth_detail, 1)
        self.assertEqual(card.speed, 1)
        self.assertEqual(card.health, 5)
        self.assertEqual(card.abilities, set())
        self.assertEqual(card.get_card_level(), 0)

    def test_max_level_resolution(self):
        card = GameCard(self.growth_detail, 3)
        self.assertEqual(card.speed, 3)
        self.assertEqual(card.health, 5)
        self.assertEqual(card.melee, 2)
        self.assertEqual(card.abilities, {"A", "B"})

    def test_attack_resolves_to_melee(self):
        card = GameCard(self.library.get_card_detail(3), 2)
        self.assertEqual(card.melee, 0)
        self.assertEqual(card.ranged, 2)
        self.assertEqual(card.health, 5)
        self.assertEqual(card.armor, 2)
        self.assertEqual(card.mana, 5)

    def test_starting_snapshots(self):
        card = GameCard(self.growth_detail, 2)
        self.assertEqual(card.starting_armor, 1)
        self.assertEqual(card.starting_health, 5)

        card.armor = 0
        card.health = 2
        self.assertEqual(card.starting_armor, 1)
        self.assertEqual(card.starting_health, 5)

    def test_starting_snapshots_are_read_only(self):
        card = GameCard(self.growth_detail, 1)
        with self.assertRaises(AttributeError):
            card.starting_health = 10

    def test_summoner_abilities_at_every_level(self):
        detail = self.library.get_card_detail(2)
        for level in range(1, 5):
            self.assertEqual(GameCard(detail, level).abilities, {"A", "B"})

    def test_no_abilities(self):
        card = GameCard(self.library.get_card_detail(3), 1)
        self.assertEqual(card.abilities, set())

    def test_untyped_card_uses_tiers(self):
        card = GameCard(self.library.get_card_detail(4), 1)
        self.assertEqual(card.abilities, {"Flying"})

    def test_construct_from_id(self):
        card = GameCard(2, 1, card_library=self.library)
        self.assertIs(card.get_card_detail(), self.library.get_card_detail(2))
        self.assertEqual(card.get_name(), "Leader Example")
        self.assertEqual(card.get_rarity(), 2)
        self.assertEqual(card.magic, 1)

    def test_construct_from_id_with_default_library(self):
        set_default_library(self.library)
        card = GameCard(1, 2)
        self.assertEqual(card.abilities, {"A"})

    def test_unknown_id_propagates(self):
        with self.assertRaises(CardNotFoundError):
            GameCard(404, 1, card_library=self.library)

    def test_level_below_one_raises(self):
        with self.assertRaises(ValueError):
            GameCard(self.growth_detail, 0)

    def test_level_out_of_range_is_index_error(self):
        with self.assertRaises(IndexError):
            GameCard(self.growth_detail, 4)

    def test_strict_levels_reports_max_level(self):
        config = BattleConfig(strict_levels=True)
        with self.assertRaises(CardLevelError) as cm:
            GameCard(self.growth_detail, 4, config=config)
        self.assertIn("max level is 3", str(cm.exception))

    def test_strict_levels_allows_constant_cards(self):
        config = BattleConfig(strict_levels=True)
        card = GameCard(self.library.get_card_detail(4), 2, config=config)
        self.assertEqual(card.abilities, {"Flying", "Shield"})

    def test_remove_ability(self):
        card = GameCard(self.growth_detail, 3)
        self.assertTrue(card.has_ability("A"))
        card.remove_ability("A")
        self.assertFalse(card.has_ability("A"))
        card.remove_ability("Not There")
        self.assertEqual(card.abilities, {"B"})

    def test_team_assignment(self):
        card = GameCard(self.growth_detail, 1)
        self.assertEqual(card.get_team_number(), TeamNumber.UNKNOWN)
        card.set_team(TeamNumber.TWO)
        self.assertEqual(card.get_team_number(), TeamNumber.TWO)
        self.assertEqual(card.speed, 1)

    def test_game_team_lookup(self):
        card = GameCard(self.growth_detail, 1)
        teams = {TeamNumber.ONE: "home", TeamNumber.TWO: "away"}
        self.assertIsNone(card.get_game_team(teams))
        card.set_game_team(TeamNumber.ONE)
        self.assertEqual(card.get_game_team(teams), "home")

    def test_buffs_and_debuffs_are_live(self):
        card = GameCard(self.growth_detail, 1)
        card.get_buffs()["Protect"] = 2
        card.get_debuffs()["Rust"] = 1
        self.assertEqual(card.get_buffs(), {"Protect": 2})
        self.assertEqual(card.get_debuffs(), {"Rust": 1})

    STAT_FIELDS = ("speed", "armor", "health", "magic", "melee", "ranged", "mana")

    def _stat_snapshot(self, card: GameCard) -> dict:
        snapshot = {name: getattr(card, name) for name in self.STAT_FIELDS}
        snapshot["starting_armor"] = card.starting_armor
        snapshot["starting_health"] = card.starting_health
        return snapshot

    def _mutate(self, card: GameCard) -> None:
        card.set_team(TeamNumber.ONE)
        card.speed = 9
        card.armor = 0
        card.health = 1
        card.magic = 4
        card.melee = 7
        card.ranged = 6
        card.mana = 2
        card.remove_ability("B")
        card.get_buffs()["Haste"] = 1
        card.get_debuffs()["Slow"] = 2

    def test_clone_mirrors_state(self):
        card = GameCard(self.growth_detail, 3)
        self._mutate(card)
        clone = card.clone()

        self.assertIsNot(clone, card)
        self.assertEqual(clone.get_team_number(), TeamNumber.ONE)
        self.assertEqual(
            self._stat_snapshot(clone),
            {
                "speed": 9,
                "armor": 0,
                "health": 1,
                "magic": 4,
                "melee": 7,
                "ranged": 6,
                "mana": 2,
                "starting_armor": 1,
                "starting_health": 5,
            },
        )
        self.assertEqual(self._stat_snapshot(clone), self._stat_snapshot(card))
        self.assertEqual(clone.abilities, {"A"})
        self.assertEqual(clone.get_buffs(), {"Haste": 1})
        self.assertEqual(clone.get_debuffs(), {"Slow": 2})
        self.assertEqual(clone.get_card_level(), card.get_card_level())

    def test_clone_shares_no_containers(self):
        card = GameCard(self.growth_detail, 3)
        card.get_buffs()["Haste"] = 1
        clone = card.clone()

        clone.remove_ability("A")
        clone.get_buffs()["Haste"] = 5
        clone.get_debuffs()["Slow"] = 1

        self.assertEqual(card.abilities, {"A", "B"})
        self.assertEqual(card.get_buffs(), {"Haste": 1})
        self.assertEqual(card.get_debuffs(), {})

    def test_clean_card_discards_battle_state(self):
        card = GameCard(self.growth_detail, 3)
        fresh = GameCard(self.growth_detail, 3)
        self._mutate(card)
        clean = card.get_clean_card()

        self.assertEqual(self._stat_snapshot(clean), self._stat_snapshot(fresh))
        self.assertEqual(
            self._stat_snapshot(clean),
            {
                "speed": 3,
                "armor": 1,
                "health": 5,
                "magic": 0,
                "melee": 2,
                "ranged": 0,
                "mana": 3,
                "starting_armor": 1,
                "starting_health": 5,
            },
        )
        self.assertEqual(clean.abilities, fresh.abilities)
        self.assertEqual(clean.get_buffs(), {})
        self.assertEqual(clean.get_debuffs(), {})
        self.assertEqual(clean.get_team_number(), TeamNumber.UNKNOWN)
        self.assertEqual(clean.get_card_level(), 2)

    def test_inline_detail(self):
        detail = CardDetail.from_dict(
            {
                "id": 100,
                "name": "Inline",
                "type": "Monster",
                "rarity": 1,
                "stats": {"speed": [1, 2, 3], "health": 5, "abilities": [[], ["A"], ["A", "B"]]},
            }
        )
        low, high = GameCard(detail, 1), GameCard(detail, 3)
        self.assertEqual((low.speed, low.health, low.abilities), (1, 5, set()))
        self.assertEqual((high.speed, high.health, high.abilities), (3, 5, {"A", "B"}))

    def test_repr(self):
        card = GameCard(self.growth_detail, 2)
        card.get_buffs()["Haste"] = 1

        expected = """
<GameCard id=1 name='Growth Example' rarity=1>
  - Info: Level=2, Team=UNKNOWN
  - Stats: Speed=2, Armor=1/1, Health=5/5, Mana=3
  - Attack (Melee/Ranged/Magic): 1/0/0
  - Abilities: A
  - Buffs: Haste=1
        """.strip()
        self.assertEqual(repr(card), expected)


if __name__ == "__main__":
    unittest.main(argv=["first-arg-is-ignored"], exit=False)

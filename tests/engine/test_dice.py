"""
Yahtzee - Dice Set Tests
"""

import random

import pytest

from src.engine.base import Die
from src.engine.dice import DiceSet


class TestDiceSetCreation:
    """Tests for a new DiceSet."""

    def test_five_dice(self):
        assert len(DiceSet()) == 5

    def test_all_unheld(self):
        dice = DiceSet()
        assert all(not die.held for die in dice)
        assert dice.held_indices() == frozenset()

    def test_default_faces(self):
        assert DiceSet().current_values() == (1, 1, 1, 1, 1)

    def test_dice_are_die_objects(self):
        assert all(isinstance(die, Die) for die in DiceSet().dice)


class TestRollUnheld:
    """Tests for DiceSet.roll_unheld()."""

    def test_uses_injected_rng(self, scripted_rng):
        dice = DiceSet(scripted_rng([6, 5, 4, 3, 2]))
        dice.roll_unheld()
        assert dice.current_values() == (6, 5, 4, 3, 2)

    def test_held_dice_untouched(self, scripted_rng):
        dice = DiceSet(scripted_rng([6, 5, 4, 3, 2, 1, 1, 1]))
        dice.roll_unheld()
        dice.toggle_held(0)
        dice.toggle_held(3)
        dice.roll_unheld()
        assert dice.current_values() == (6, 1, 1, 3, 1)

    def test_all_held_draws_nothing(self, scripted_rng):
        dice = DiceSet(scripted_rng([2, 2, 2, 2, 2]))
        dice.roll_unheld()
        for i in range(5):
            dice.toggle_held(i)
        # Script is exhausted; any draw would fail
        dice.roll_unheld()
        assert dice.current_values() == (2, 2, 2, 2, 2)

    def test_value_range(self):
        dice = DiceSet(random.Random(7))
        for _ in range(200):
            dice.roll_unheld()
            assert all(1 <= v <= 6 for v in dice.current_values())

    def test_all_faces_appear(self):
        dice = DiceSet(random.Random(7))
        seen: set[int] = set()
        for _ in range(200):
            dice.roll_unheld()
            seen.update(dice.current_values())
        assert seen == {1, 2, 3, 4, 5, 6}

    def test_seeded_rolls_repeat(self):
        first = DiceSet(random.Random(42))
        second = DiceSet(random.Random(42))
        first.roll_unheld()
        second.roll_unheld()
        assert first.current_values() == second.current_values()


class TestToggleHeld:
    """Tests for DiceSet.toggle_held()."""

    def test_toggle_on_and_off(self):
        dice = DiceSet()
        assert dice.toggle_held(2) is True
        assert dice.is_held(2)
        assert dice.toggle_held(2) is False
        assert not dice.is_held(2)

    def test_only_target_changes(self):
        dice = DiceSet()
        dice.toggle_held(4)
        assert dice.held_indices() == frozenset({4})

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_raises(self, index):
        with pytest.raises(IndexError, match="out of range"):
            DiceSet().toggle_held(index)

    def test_non_integer_raises(self):
        with pytest.raises(IndexError, match="must be an integer"):
            DiceSet().toggle_held("0")


class TestQueries:
    """Tests for value(), is_held() and current_values()."""

    def test_value(self):
        dice = DiceSet()
        dice.set_values((3, 1, 4, 1, 5))
        assert dice.value(2) == 4

    def test_value_out_of_range(self):
        with pytest.raises(IndexError):
            DiceSet().value(5)

    def test_is_held_out_of_range(self):
        with pytest.raises(IndexError):
            DiceSet().is_held(-1)

    def test_current_values_does_not_mutate(self):
        dice = DiceSet()
        dice.set_values((3, 1, 4, 1, 5))
        dice.current_values()
        assert dice.current_values() == (3, 1, 4, 1, 5)


class TestResetForNewTurn:
    """Tests for DiceSet.reset_for_new_turn()."""

    def test_releases_all(self):
        dice = DiceSet()
        dice.toggle_held(0)
        dice.toggle_held(1)
        dice.reset_for_new_turn()
        assert dice.held_indices() == frozenset()

    def test_keeps_values(self):
        dice = DiceSet()
        dice.set_values((6, 6, 2, 2, 1))
        dice.toggle_held(0)
        dice.reset_for_new_turn()
        assert dice.current_values() == (6, 6, 2, 2, 1)


class TestSetValues:
    """Tests for DiceSet.set_values()."""

    def test_keeps_held_flags(self):
        dice = DiceSet()
        dice.toggle_held(1)
        dice.set_values((2, 3, 4, 5, 6))
        assert dice.is_held(1)

    def test_wrong_count_raises(self):
        with pytest.raises(ValueError, match="Exactly 5 dice required"):
            DiceSet().set_values((1, 2, 3))

    def test_bad_face_raises(self):
        with pytest.raises(ValueError, match="must be between 1 and 6"):
            DiceSet().set_values((0, 2, 3, 4, 5))

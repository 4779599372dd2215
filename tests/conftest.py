"""
Yahtzee - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable

import pytest

from src.engine.base import Category
from src.engine.yahtzee import YahtzeeGame


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[Category, tuple[int, ...], int]]:
    """
    Roll patterns with expected scores.

    Returns:
        Dict mapping name to (category, dice_values, expected_points)
    """
    return {
        "ones": (Category.ONES, (1, 1, 3, 4, 1), 3),
        "threes": (Category.THREES, (3, 3, 1, 3, 5), 9),
        "sixes_none": (Category.SIXES, (1, 2, 3, 4, 5), 0),
        "chance": (Category.CHANCE, (6, 3, 3, 3, 3), 18),
        "three_kind": (Category.THREE_OF_A_KIND, (2, 2, 2, 5, 6), 17),
        "four_kind": (Category.FOUR_OF_A_KIND, (5, 5, 5, 5, 1), 21),
        "full_house": (Category.FULL_HOUSE, (2, 2, 3, 3, 3), 25),
        "small_straight": (Category.SMALL_STRAIGHT, (1, 2, 3, 4, 6), 30),
        "large_straight": (Category.LARGE_STRAIGHT, (2, 3, 4, 5, 6), 40),
        "yahtzee": (Category.YAHTZEE, (4, 4, 4, 4, 4), 50),
    }


# =============================================================================
# RANDOM SOURCES
# =============================================================================

class ScriptedRandom:
    """Stand-in random source that deals faces from a fixed script, in order."""

    def __init__(self, faces: list[int]) -> None:
        self._faces = list(faces)

    def randint(self, a: int, b: int) -> int:
        if not self._faces:
            raise AssertionError("Scripted faces exhausted")
        face = self._faces.pop(0)
        assert a <= face <= b
        return face


@pytest.fixture
def scripted_rng() -> Callable[[list[int]], ScriptedRandom]:
    """Factory for a random source dealing the given faces in order."""
    return ScriptedRandom


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def game() -> YahtzeeGame:
    """Fresh game with a seeded random source."""
    return YahtzeeGame(rng=random.Random(1234))


@pytest.fixture
def rolled_game(game: YahtzeeGame) -> YahtzeeGame:
    """Game that has taken the first roll of turn 1."""
    assert game.roll()
    return game

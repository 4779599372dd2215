"""
Yahtzee - Scoring Engine

Maps five die faces to a score for each of the 13 categories. All methods
are stateless class methods operating on immutable inputs; every rule is
total over all 6^5 possible rolls.

Scoring Rules:
    - Ones..Sixes: sum of dice showing the target face
    - Three of a Kind: sum of all dice if any face appears 3+ times
    - Four of a Kind: sum of all dice if any face appears 4+ times
    - Full House: 25 points for exactly a pair plus a triple
    - Small Straight: 30 points for four consecutive faces
    - Large Straight: 40 points for five consecutive faces
    - Chance: sum of all dice
    - YAHTZEE: 50 points for five of a kind

Categories may be given as members or names; an unknown name raises
ValueError, as do dice that are not exactly five faces in 1-6.
"""

from collections import Counter
from typing import Sequence

from src.engine.base import Category
from src.engine.validators import validate_category, validate_dice_values


class ScoringEngine:
    """
    Stateless scoring rules.

    All methods are class methods; nothing is stored between calls.
    """

    # Scoring values
    FULL_HOUSE_POINTS = 25
    SMALL_STRAIGHT_POINTS = 30
    LARGE_STRAIGHT_POINTS = 40
    YAHTZEE_POINTS = 50

    SMALL_STRAIGHTS = (
        frozenset({1, 2, 3, 4}),
        frozenset({2, 3, 4, 5}),
        frozenset({3, 4, 5, 6}),
    )
    LARGE_STRAIGHTS = (
        frozenset({1, 2, 3, 4, 5}),
        frozenset({2, 3, 4, 5, 6}),
    )

    @classmethod
    def calculate_score(
        cls,
        category: Category | str,
        dice: Sequence[int],
        *,
        full_house_allows_yahtzee: bool = False
    ) -> int:
        """
        Score five dice against a category.

        Args:
            category: Category member or name
            dice: Exactly five face values in 1-6
            full_house_allows_yahtzee: Let five of a kind count as a Full House

        Returns:
            Points for the category (0 when the pattern is absent)

        Raises:
            ValueError: On an unknown category or invalid dice
        """
        category = validate_category(category)
        values = validate_dice_values(dice)

        if category.is_numeric:
            return cls.score_numeric(values, category.target_face)
        if category is Category.THREE_OF_A_KIND:
            return cls.score_of_a_kind(values, 3)
        if category is Category.FOUR_OF_A_KIND:
            return cls.score_of_a_kind(values, 4)
        if category is Category.FULL_HOUSE:
            return cls.score_full_house(values, allow_yahtzee=full_house_allows_yahtzee)
        if category is Category.SMALL_STRAIGHT:
            return cls.score_small_straight(values)
        if category is Category.LARGE_STRAIGHT:
            return cls.score_large_straight(values)
        if category is Category.CHANCE:
            return cls.score_chance(values)
        return cls.score_yahtzee(values)

    @classmethod
    def calculate_all(
        cls,
        dice: Sequence[int],
        *,
        full_house_allows_yahtzee: bool = False
    ) -> dict[Category, int]:
        """Score the dice against every category, in sheet order."""
        values = validate_dice_values(dice)
        return {
            category: cls.calculate_score(
                category, values, full_house_allows_yahtzee=full_house_allows_yahtzee
            )
            for category in Category
        }

    @classmethod
    def score_numeric(cls, values: tuple[int, ...], face: int) -> int:
        """Sum of the dice showing `face`."""
        return sum(v for v in values if v == face)

    @classmethod
    def score_chance(cls, values: tuple[int, ...]) -> int:
        return sum(values)

    @classmethod
    def score_of_a_kind(cls, values: tuple[int, ...], threshold: int) -> int:
        """Sum of all dice if any face appears at least `threshold` times."""
        counts = Counter(values)
        if max(counts.values()) >= threshold:
            return sum(values)
        return 0

    @classmethod
    def score_full_house(cls, values: tuple[int, ...], allow_yahtzee: bool = False) -> int:
        """
        25 points when one face appears exactly twice and another three times.

        Five of a kind does not qualify unless `allow_yahtzee` is set.
        """
        counts = sorted(Counter(values).values())
        if counts == [2, 3]:
            return cls.FULL_HOUSE_POINTS
        if allow_yahtzee and counts == [5]:
            return cls.FULL_HOUSE_POINTS
        return 0

    @classmethod
    def score_small_straight(cls, values: tuple[int, ...]) -> int:
        faces = set(values)
        if any(run <= faces for run in cls.SMALL_STRAIGHTS):
            return cls.SMALL_STRAIGHT_POINTS
        return 0

    @classmethod
    def score_large_straight(cls, values: tuple[int, ...]) -> int:
        faces = frozenset(values)
        if faces in cls.LARGE_STRAIGHTS:
            return cls.LARGE_STRAIGHT_POINTS
        return 0

    @classmethod
    def score_yahtzee(cls, values: tuple[int, ...]) -> int:
        counts = Counter(values)
        if 5 in counts.values():
            return cls.YAHTZEE_POINTS
        return 0

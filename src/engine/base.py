"""
Yahtzee - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are immutable (frozen dataclasses); the
controller swaps whole instances instead of mutating fields.
"""

from dataclasses import dataclass
from enum import Enum, auto


NUM_DICE = 5
ROLLS_PER_TURN = 3


class DiceType(Enum):
    """Type of dice used in the game."""
    D6 = 6


class Category(Enum):
    """The 13 scoring slots, each filled exactly once per game."""
    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    THREE_OF_A_KIND = "three_of_a_kind"
    FOUR_OF_A_KIND = "four_of_a_kind"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    CHANCE = "chance"
    YAHTZEE = "yahtzee"

    @property
    def label(self) -> str:
        """Human-readable name shown on the score sheet."""
        return _CATEGORY_LABELS[self]

    @property
    def target_face(self) -> int | None:
        """Face counted by a numeric category, None for the others."""
        return _NUMERIC_TARGETS.get(self)

    @property
    def is_numeric(self) -> bool:
        return self in _NUMERIC_TARGETS


_CATEGORY_LABELS: dict[Category, str] = {
    Category.ONES: "Ones",
    Category.TWOS: "Twos",
    Category.THREES: "Threes",
    Category.FOURS: "Fours",
    Category.FIVES: "Fives",
    Category.SIXES: "Sixes",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.SMALL_STRAIGHT: "Small Straight",
    Category.LARGE_STRAIGHT: "Large Straight",
    Category.CHANCE: "Chance",
    Category.YAHTZEE: "YAHTZEE",
}

_NUMERIC_TARGETS: dict[Category, int] = {
    Category.ONES: 1,
    Category.TWOS: 2,
    Category.THREES: 3,
    Category.FOURS: 4,
    Category.FIVES: 5,
    Category.SIXES: 6,
}


class TurnPhase(Enum):
    """Where the current turn stands."""
    AWAITING_ROLL = auto()        # No roll yet this turn
    ROLLING_ALLOWED = auto()      # Rolled at least once, rolls left
    CATEGORY_SELECTABLE = auto()  # Out of rolls, must score
    TURN_COMPLETE = auto()        # Category scored, end-of-turn pending
    GAME_OVER = auto()            # All 13 categories used


@dataclass(frozen=True)
class Die:
    """
    A single die owned by the dice set.

    Attributes:
        value: Current face (1-6)
        held: Whether the die sits out the next roll
    """
    value: int = 1
    held: bool = False

    def __post_init__(self) -> None:
        """Validate the face is within range."""
        if not (1 <= self.value <= DiceType.D6.value):
            raise ValueError(
                f"Invalid die value {self.value}. "
                f"Must be between 1 and {DiceType.D6.value}."
            )


@dataclass(frozen=True)
class CategoryState:
    """
    Score sheet entry for one category.

    Attributes:
        score: Points recorded (meaningful only once used)
        used: Whether the category has been filled this game
    """
    score: int = 0
    used: bool = False


@dataclass(frozen=True)
class TurnState:
    """
    State of the turn in progress.

    Attributes:
        rolls_remaining: Rolls left this turn (never negative)
        dice_rolled: True after the first roll of the turn
        category_selected: True once a category has been scored this turn
    """
    rolls_remaining: int = ROLLS_PER_TURN
    dice_rolled: bool = False
    category_selected: bool = False

    def __post_init__(self) -> None:
        if self.rolls_remaining < 0:
            raise ValueError(
                f"Rolls remaining cannot be negative, got {self.rolls_remaining}."
            )

    @classmethod
    def fresh(cls, rolls_per_turn: int = ROLLS_PER_TURN) -> "TurnState":
        """Turn state at the start of a turn."""
        return cls(rolls_remaining=rolls_per_turn)


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        rolls_per_turn: Rolls available at the start of each turn
        full_house_allows_yahtzee: Score five of a kind as a Full House
    """
    rolls_per_turn: int = ROLLS_PER_TURN
    full_house_allows_yahtzee: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.rolls_per_turn, int) or self.rolls_per_turn < 1:
            raise ValueError(
                f"Rolls per turn must be a positive integer, got {self.rolls_per_turn}."
            )

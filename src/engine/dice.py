"""
Yahtzee - Dice Set

Five dice with per-die held flags. Rolling draws from a single injected
random source so games can be seeded or mocked.
"""

import logging
import random
from dataclasses import replace
from typing import Iterator, Sequence

from src.engine.base import NUM_DICE, DiceType, Die
from src.engine.validators import validate_dice_values, validate_die_index

logger = logging.getLogger(__name__)


class DiceSet:
    """
    Ordered collection of exactly five dice.

    Each Die is immutable; the set replaces entries when a die is rolled
    or its held flag flips, so the size never changes.
    """

    DICE_TYPE = DiceType.D6

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._dice: list[Die] = [Die() for _ in range(NUM_DICE)]

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

    @property
    def dice(self) -> tuple[Die, ...]:
        """Current dice, in order."""
        return tuple(self._dice)

    @property
    def rng(self) -> random.Random:
        return self._rng

    def roll_unheld(self) -> None:
        """Give every unheld die a new face drawn uniformly from 1-6."""
        faces = self.DICE_TYPE.value
        self._dice = [
            die if die.held else replace(die, value=self._rng.randint(1, faces))
            for die in self._dice
        ]
        logger.debug("Rolled dice: %s (held %s)", self.current_values(), sorted(self.held_indices()))

    def toggle_held(self, index: int) -> bool:
        """
        Flip the held flag of one die.

        Args:
            index: Die position (0-4)

        Returns:
            The new held flag

        Raises:
            IndexError: If index is out of range
        """
        validate_die_index(index, len(self._dice))
        die = self._dice[index]
        self._dice[index] = replace(die, held=not die.held)
        return self._dice[index].held

    def current_values(self) -> tuple[int, ...]:
        """Face values of all five dice, in order."""
        return tuple(die.value for die in self._dice)

    def value(self, index: int) -> int:
        validate_die_index(index, len(self._dice))
        return self._dice[index].value

    def is_held(self, index: int) -> bool:
        validate_die_index(index, len(self._dice))
        return self._dice[index].held

    def held_indices(self) -> frozenset[int]:
        """Indices of dice currently held."""
        return frozenset(i for i, die in enumerate(self._dice) if die.held)

    def reset_for_new_turn(self) -> None:
        """Release every held die. Face values stay until the next roll."""
        self._dice = [replace(die, held=False) for die in self._dice]

    def set_values(self, values: Sequence[int]) -> None:
        """
        Place the dice on specific faces, keeping held flags.

        Raises:
            ValueError: Unless exactly five values in 1-6 are given
        """
        validated = validate_dice_values(values, self.DICE_TYPE, len(self._dice))
        self._dice = [
            replace(die, value=value) for die, value in zip(self._dice, validated)
        ]

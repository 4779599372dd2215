"""
Yahtzee - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions: ValueError
for bad values, IndexError for die indices out of range.
"""

from typing import Sequence

from src.engine.base import NUM_DICE, Category, DiceType


def validate_dice_values(
    values: Sequence[int],
    dice_type: DiceType = DiceType.D6,
    count: int = NUM_DICE
) -> tuple[int, ...]:
    """
    Validate and normalize a full set of dice values.

    Args:
        values: Sequence of dice values to validate
        dice_type: Type of dice (determines valid range)
        count: Exact number of dice required

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)

    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    max_value = dice_type.value
    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= max_value):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {max_value} for {dice_type.name}."
            )

    return values_tuple


def validate_die_index(index: int, dice_count: int = NUM_DICE) -> int:
    """
    Validate a die index.

    Args:
        index: Position of the die in the set
        dice_count: Total number of dice

    Returns:
        Validated index

    Raises:
        IndexError: If the index is not an integer in range
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise IndexError(f"Die index must be an integer, got {type(index).__name__}.")

    if not (0 <= index < dice_count):
        raise IndexError(
            f"Die index {index} is out of range. Must be between 0 and {dice_count - 1}."
        )

    return index


def _normalize_name(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch.isalnum())


_CATEGORY_LOOKUP: dict[str, Category] = {
    _normalize_name(alias): category
    for category in Category
    for alias in (category.value, category.name, category.label)
}


def validate_category(category: Category | str) -> Category:
    """
    Resolve a category from an enum member or a name.

    Names are matched case-insensitively ignoring spaces and underscores,
    so "full_house", "FULL_HOUSE", "FullHouse" and "Full House" all resolve.

    Args:
        category: Category member or name

    Returns:
        The matching Category

    Raises:
        ValueError: If the name does not match any category
    """
    if isinstance(category, Category):
        return category

    if not isinstance(category, str):
        raise ValueError(f"Category must be a Category or string, got {type(category).__name__}.")

    resolved = _CATEGORY_LOOKUP.get(_normalize_name(category))
    if resolved is None:
        raise ValueError(f"Unknown category {category!r}.")

    return resolved

"""
Yahtzee - State Snapshots

Pydantic models describing the game for the presentation layer. A snapshot
is a read-only copy; changing it never affects the game.
"""

from pydantic import BaseModel, Field

from src.engine.base import NUM_DICE, Category


class DieSnapshot(BaseModel):
    """One die as displayed."""

    index: int = Field(ge=0, lt=NUM_DICE)
    value: int = Field(ge=1, le=6)
    held: bool = False

    model_config = {"frozen": True}


class CategorySnapshot(BaseModel):
    """One score sheet row."""

    name: str
    label: str
    score: int = 0
    used: bool = False

    model_config = {"frozen": True}


class GameSnapshot(BaseModel):
    """Everything the presentation layer needs to draw the table."""

    dice: list[DieSnapshot] = Field(min_length=NUM_DICE, max_length=NUM_DICE)
    categories: list[CategorySnapshot] = Field(min_length=len(Category), max_length=len(Category))
    rolls_remaining: int = Field(ge=0)
    dice_rolled: bool = False
    phase: str
    turn_number: int = Field(ge=1)
    total_score: int = 0
    is_game_over: bool = False

    model_config = {"frozen": True}

    def category(self, name: str) -> CategorySnapshot:
        """Look up a row by category value (e.g. "full_house")."""
        for row in self.categories:
            if row.name == name:
                return row
        raise KeyError(name)

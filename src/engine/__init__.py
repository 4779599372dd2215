"""
Yahtzee Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, holding, category scoring and game-over detection.
"""

from src.engine.base import (
    Category,
    CategoryState,
    DiceType,
    Die,
    GameConfig,
    TurnPhase,
    TurnState,
)
from src.engine.dice import DiceSet
from src.engine.events import EventPayload, GameEvent
from src.engine.scoring import ScoringEngine
from src.engine.snapshot import CategorySnapshot, DieSnapshot, GameSnapshot
from src.engine.yahtzee import YahtzeeGame

__all__ = [
    # Data Classes
    "CategoryState",
    "Die",
    "GameConfig",
    "TurnState",
    "EventPayload",
    # Enums
    "Category",
    "DiceType",
    "GameEvent",
    "TurnPhase",
    # Snapshots
    "CategorySnapshot",
    "DieSnapshot",
    "GameSnapshot",
    # Engines
    "DiceSet",
    "ScoringEngine",
    "YahtzeeGame",
]

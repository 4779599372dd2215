"""
Yahtzee - Game Event Definitions

Event types and payloads published by the game controller to in-process
listeners such as a rendering layer.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    DICE_HELD = auto()
    CATEGORY_SCORED = auto()
    TURN_ADVANCED = auto()
    GAME_OVER = auto()
    GAME_RESET = auto()


@dataclass
class EventPayload:
    """Wrapper for game event data."""

    event: GameEvent
    turn_number: int
    data: dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventPayload], None]

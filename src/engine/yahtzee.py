"""
Yahtzee - Turn and Game Controller

Orchestrates a single-player game: rolls remaining, which dice may be held,
which category may be scored, the running total and game-over detection.

Turn flow:
- Up to 3 rolls per turn; holding is allowed after the first roll
- Exactly one unused category is scored per turn
- The game ends once all 13 categories are used

Illegal actions never raise. Each action method returns True when the
action was accepted and False when it was ignored, leaving state untouched.
Only programmer misuse raises: an out-of-range die index (IndexError) or
an unknown category name (ValueError).
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import TYPE_CHECKING

from src.engine.base import (
    Category,
    CategoryState,
    GameConfig,
    TurnPhase,
    TurnState,
)
from src.engine.dice import DiceSet
from src.engine.events import EventListener, EventPayload, GameEvent
from src.engine.scoring import ScoringEngine
from src.engine.snapshot import CategorySnapshot, DieSnapshot, GameSnapshot
from src.engine.validators import validate_category, validate_die_index

if TYPE_CHECKING:
    from src.config.settings import Settings

logger = logging.getLogger(__name__)


class YahtzeeGame:
    """
    Stateful controller for one game.

    Owns the dice set, the 13 category states and the turn state. The
    presentation layer drives it through roll(), toggle_held() and
    select_category(), and reads it through the query methods or snapshot().
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or GameConfig()
        self._dice = DiceSet(rng)
        self._listeners: list[EventListener] = []
        self._categories: dict[Category, CategoryState] = {}
        self._turn = TurnState.fresh(self._config.rolls_per_turn)
        self._turn_number = 1
        self._generation = 0
        self._reset_state()

    @classmethod
    def from_settings(cls, settings: Settings) -> YahtzeeGame:
        """Build a game from application settings."""
        rng = random.Random(settings.rng_seed) if settings.rng_seed is not None else None
        return cls(config=settings.game_config(), rng=rng)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def roll(self) -> bool:
        """Roll every unheld die. Rejected once the turn's rolls are spent."""
        if self.is_game_over:
            return self._reject("roll", "game is over")
        if self._turn.category_selected:
            return self._reject("roll", "category already selected this turn")
        if self._turn.rolls_remaining <= 0:
            return self._reject("roll", "no rolls remaining")

        self._dice.roll_unheld()
        self._turn = replace(
            self._turn,
            rolls_remaining=self._turn.rolls_remaining - 1,
            dice_rolled=True,
        )
        self._publish(
            GameEvent.DICE_ROLLED,
            values=list(self._dice.current_values()),
            rolls_remaining=self._turn.rolls_remaining,
        )
        return True

    def toggle_held(self, index: int) -> bool:
        """
        Hold or release one die between rolls.

        Raises:
            IndexError: If index is not 0-4
        """
        validate_die_index(index, len(self._dice))

        if self.is_game_over:
            return self._reject("toggle_held", "game is over")
        if not self._turn.dice_rolled or self._turn.rolls_remaining >= self._config.rolls_per_turn:
            return self._reject("toggle_held", "dice not rolled this turn")
        if self._turn.category_selected:
            return self._reject("toggle_held", "category already selected this turn")

        held = self._dice.toggle_held(index)
        logger.debug("Die %d %s", index, "held" if held else "released")
        self._publish(GameEvent.DICE_HELD, index=index, held=held)
        return True

    def select_category(self, name: Category | str) -> bool:
        """
        Score the current dice in a category and end the turn.

        Raises:
            ValueError: If name is not a known category
        """
        category = validate_category(name)

        if self.is_game_over:
            return self._reject("select_category", "game is over")
        if not self._turn.dice_rolled:
            return self._reject("select_category", "dice not rolled this turn")
        if self._turn.category_selected:
            return self._reject("select_category", "category already selected this turn")
        if self._categories[category].used:
            return self._reject("select_category", f"{category.label} already used")

        values = self._dice.current_values()
        score = ScoringEngine.calculate_score(
            category,
            values,
            full_house_allows_yahtzee=self._config.full_house_allows_yahtzee,
        )
        self._categories[category] = CategoryState(score=score, used=True)
        self._turn = replace(self._turn, category_selected=True)
        generation = self._generation

        logger.info(
            "Scored %d in %s with %s (total %d)",
            score, category.label, values, self.total_score,
        )
        self._publish(
            GameEvent.CATEGORY_SCORED,
            category=category.value,
            score=score,
            values=list(values),
            total_score=self.total_score,
        )
        # A listener may have started a new game while handling the event
        if self._generation == generation:
            self._end_turn()
        return True

    def new_game(self) -> None:
        """Clear the score sheet and start again from turn 1."""
        self._reset_state()
        logger.info("New game started")
        self._publish(GameEvent.GAME_RESET)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def turn_state(self) -> TurnState:
        return self._turn

    @property
    def turn_number(self) -> int:
        return self._turn_number

    @property
    def rolls_remaining(self) -> int:
        return self._turn.rolls_remaining

    @property
    def dice_values(self) -> tuple[int, ...]:
        return self._dice.current_values()

    def die_value(self, index: int) -> int:
        return self._dice.value(index)

    def is_held(self, index: int) -> bool:
        return self._dice.is_held(index)

    def category_state(self, name: Category | str) -> CategoryState:
        return self._categories[validate_category(name)]

    @property
    def total_score(self) -> int:
        """Sum of the scores of all used categories."""
        return sum(state.score for state in self._categories.values() if state.used)

    @property
    def is_game_over(self) -> bool:
        return all(state.used for state in self._categories.values())

    @property
    def phase(self) -> TurnPhase:
        if self.is_game_over:
            return TurnPhase.GAME_OVER
        if self._turn.category_selected:
            return TurnPhase.TURN_COMPLETE
        if not self._turn.dice_rolled:
            return TurnPhase.AWAITING_ROLL
        if self._turn.rolls_remaining > 0:
            return TurnPhase.ROLLING_ALLOWED
        return TurnPhase.CATEGORY_SELECTABLE

    def available_categories(self) -> list[Category]:
        """Unused categories, in sheet order."""
        return [c for c, state in self._categories.items() if not state.used]

    def potential_scores(self) -> dict[Category, int]:
        """
        What each unused category would score with the current dice.

        Empty before the first roll of a turn, since nothing can be scored yet.
        """
        if not self._turn.dice_rolled or self.is_game_over:
            return {}
        values = self._dice.current_values()
        return {
            category: ScoringEngine.calculate_score(
                category,
                values,
                full_house_allows_yahtzee=self._config.full_house_allows_yahtzee,
            )
            for category in self.available_categories()
        }

    def snapshot(self) -> GameSnapshot:
        """Read-only copy of the full game state."""
        return GameSnapshot(
            dice=[
                DieSnapshot(index=i, value=die.value, held=die.held)
                for i, die in enumerate(self._dice)
            ],
            categories=[
                CategorySnapshot(
                    name=category.value,
                    label=category.label,
                    score=state.score,
                    used=state.used,
                )
                for category, state in self._categories.items()
            ],
            rolls_remaining=self._turn.rolls_remaining,
            dice_rolled=self._turn.dice_rolled,
            phase=self.phase.name,
            turn_number=self._turn_number,
            total_score=self.total_score,
            is_game_over=self.is_game_over,
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        """Register a callback invoked after every accepted action."""
        if listener in self._listeners:
            logger.warning("Listener %r already subscribed", listener)
            return
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _end_turn(self) -> None:
        if self.is_game_over:
            logger.info("Game over with %d points", self.total_score)
            self._publish(GameEvent.GAME_OVER, total_score=self.total_score)
            return

        self._turn = TurnState.fresh(self._config.rolls_per_turn)
        self._dice.reset_for_new_turn()
        self._turn_number += 1
        self._publish(GameEvent.TURN_ADVANCED)

    def _reset_state(self) -> None:
        self._categories = {category: CategoryState() for category in Category}
        self._turn = TurnState.fresh(self._config.rolls_per_turn)
        self._dice.reset_for_new_turn()
        self._turn_number = 1
        self._generation += 1

    def _reject(self, action: str, reason: str) -> bool:
        logger.debug("Rejected %s: %s", action, reason)
        return False

    def _publish(self, event: GameEvent, **data) -> None:
        payload = EventPayload(event=event, turn_number=self._turn_number, data=data)
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Error in listener for %s", event.name)

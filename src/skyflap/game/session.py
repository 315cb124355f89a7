"""
Game session - drives the world each frame and handles player input.

The session owns the current GameState. It mirrors the game-over flag into
the phase state machine and announces score, level, power-up and game-over
changes on the event bus.
"""

import logging
import time
from typing import Callable, Optional

from skyflap.core.events import Event, EventBus, EventType
from skyflap.core.state import Phase, StateMachine
from skyflap.game.entities import GameState
from skyflap.game.world import World

logger = logging.getLogger(__name__)


class GameSession:
    """Single-player run with restart support."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        state_machine: Optional[StateMachine] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.state_machine = state_machine or StateMachine()
        self._clock = clock
        self._state = world.new_game()
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def state(self) -> GameState:
        return self._state

    def attach(self) -> None:
        """Subscribe to input and tick events."""
        self._unsubscribers = [
            self.event_bus.subscribe(EventType.FLAP, self._on_flap),
            self.event_bus.subscribe(EventType.RESTART_CLICK, self._on_restart_click),
            self.event_bus.subscribe(EventType.TICK, self._on_tick),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # Input

    def flap(self) -> None:
        """Jump while alive, restart after game over."""
        if self._state.game_over:
            self.restart()
        else:
            self._state = self.world.jump(self._state)

    def restart(self) -> None:
        self._state = self.world.new_game()
        ctx = self.state_machine.context
        self.state_machine.transition(Phase.PLAYING, games_played=ctx.games_played + 1)
        logger.info("Game restarted")
        self._emit(EventType.RESTARTED)

    # Loop

    def update(self) -> GameState:
        """Advance one tick. A no-op once the game is over."""
        before = self._state
        if before.game_over:
            return before

        after = self.world.step(before, self._clock())
        self._state = after
        self._announce(before, after)
        return after

    def _announce(self, before: GameState, after: GameState) -> None:
        if after.score != before.score:
            self._emit(EventType.SCORE_CHANGED, score=after.score)

        if after.level != before.level:
            logger.info(f"Level up: {after.level} (next at {after.next_level_score})")
            self._emit(EventType.LEVEL_UP, level=after.level)

        expires = after.power_up_expires_at
        if expires is not None and expires != before.power_up_expires_at:
            logger.info("Power-up collected")
            self._emit(EventType.POWER_UP_COLLECTED, expires_at=expires)

        if after.game_over:
            logger.info(f"Game over: score={after.score} level={after.level}")
            self.state_machine.transition(
                Phase.GAME_OVER,
                final_score=after.score,
                final_level=after.level,
            )
            self._emit(EventType.GAME_OVER, score=after.score, level=after.level)

    def _emit(self, event_type: EventType, **data) -> None:
        self.event_bus.emit(Event(event_type, data=data, source="session"))

    # Event handlers

    def _on_flap(self, event: Event) -> None:
        self.flap()

    def _on_restart_click(self, event: Event) -> None:
        if self._state.game_over:
            self.restart()

    def _on_tick(self, event: Event) -> None:
        self.update()

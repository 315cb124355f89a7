"""
Phase state machine for SKYFLAP.

States:
    PLAYING: The simulation is running and jump input is live
    GAME_OVER: The end screen is shown; only restart is accepted
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Any
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Application phases."""
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass
class PhaseContext:
    """Context data carried across phase changes."""
    final_score: int | None = None
    final_level: int | None = None
    games_played: int = 0


PhaseListener = Callable[[Phase, Phase, PhaseContext], None]


class StateMachine:
    """
    Manages application phase and transitions.

    Ensures only valid transitions happen and notifies listeners of
    changes.
    """

    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        (Phase.PLAYING, Phase.GAME_OVER),
        (Phase.GAME_OVER, Phase.PLAYING),  # Restart
        (Phase.PLAYING, Phase.PLAYING),    # Restart mid-run
    ]

    def __init__(self, initial_phase: Phase = Phase.PLAYING) -> None:
        self._phase = initial_phase
        self._context = PhaseContext()
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    @property
    def context(self) -> PhaseContext:
        """Get current context."""
        return self._context

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase, **context_updates: Any) -> bool:
        """
        Attempt to transition to a new phase.

        Args:
            to_phase: Target phase
            **context_updates: Updates to apply to context

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase, self._context)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

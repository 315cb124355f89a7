import itertools

import pytest

from skyflap.core.events import EventBus
from skyflap.core.state import StateMachine
from skyflap.game.entities import GameRules, GameState, Obstacle, new_game
from skyflap.game.session import GameSession
from skyflap.game.world import World


class ScriptedRandom:
    """Random source replaying fixed values in a loop."""

    def __init__(self, *values: float) -> None:
        self._values = itertools.cycle(values or (0.5,))

    def random(self) -> float:
        return next(self._values)


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def rules() -> GameRules:
    return GameRules()


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom(0.5)


@pytest.fixture
def world(rules, rng) -> World:
    return World(rules, rng)


@pytest.fixture
def fresh(rules) -> GameState:
    return new_game(rules)


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(world, bus, clock) -> GameSession:
    s = GameSession(world, bus, StateMachine(), clock=clock)
    s.attach()
    return s


def far_obstacle(x: float = 250.0, top: float = 100.0, bottom: float = 30.0, **kw) -> Obstacle:
    """Obstacle with a wide gap, clear of the avatar unless placed on it."""
    return Obstacle(x=x, width=40.0, top=top, bottom=bottom, **kw)

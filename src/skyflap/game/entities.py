"""
Entity records for the SKYFLAP simulation.

All records are frozen: every update step takes a GameState and returns a
new one. Collections are tuples kept in spawn order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


@dataclass(frozen=True)
class GameRules:
    """Tunable constants. Distances are playfield pixels, times are ticks
    unless noted otherwise."""

    canvas_width: int = 320
    canvas_height: int = 480

    avatar_x: float = 50.0
    avatar_y: float = 150.0
    avatar_size: float = 20.0
    gravity: float = 0.6
    lift: float = -10.0

    scroll_speed: float = 2.0
    spawn_interval: int = 90
    obstacle_width: float = 40.0
    gap: float = 350.0

    power_up_interval: int = 5
    power_up_clear_count: int = 10
    power_up_duration: float = 5.0  # seconds

    initial_level: int = 1
    initial_threshold: int = 10
    level_step: int = 10


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def overlaps(self, other: Box) -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Avatar:
    x: float
    y: float
    width: float
    height: float
    velocity: float = 0.0

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Obstacle:
    x: float
    width: float
    top: float     # height of the upper solid region
    bottom: float  # height of the lower solid region, <= 0 means none
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width

    def solid_boxes(self, canvas_height: float) -> tuple[Box, Box]:
        """Upper and lower blocking regions."""
        return (
            Box(self.x, 0.0, self.width, self.top),
            Box(self.x, canvas_height - self.bottom, self.width, self.bottom),
        )


@dataclass(frozen=True)
class PowerUp:
    x: float
    y: float
    size: float

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.size, self.size)


@dataclass(frozen=True)
class GameState:
    avatar: Avatar
    obstacles: tuple[Obstacle, ...] = ()
    power_ups: tuple[PowerUp, ...] = ()

    score: int = 0
    level: int = 1
    next_level_score: int = 10
    game_over: bool = False
    frame: int = 0

    # Monotonic time (seconds) at which the active power-up wears off
    power_up_expires_at: Optional[float] = None

    @property
    def power_up_active(self) -> bool:
        return self.power_up_expires_at is not None


def new_game(rules: GameRules) -> GameState:
    """Fresh state, used both at startup and on restart."""
    avatar = Avatar(
        x=rules.avatar_x,
        y=rules.avatar_y,
        width=rules.avatar_size,
        height=rules.avatar_size,
    )
    return GameState(
        avatar=avatar,
        level=rules.initial_level,
        next_level_score=rules.initial_threshold,
    )

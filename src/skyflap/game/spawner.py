"""Obstacle and power-up creation, plus off-screen pruning."""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Optional

from skyflap.game.entities import GameRules, GameState, Obstacle, PowerUp, RandomSource

logger = logging.getLogger(__name__)


def make_obstacle(rules: GameRules, rng: RandomSource) -> Obstacle:
    """New obstacle at the right edge with a random gap position."""
    top = math.floor(rng.random() * (rules.canvas_height / 2))
    return Obstacle(
        x=float(rules.canvas_width),
        width=rules.obstacle_width,
        top=float(top),
        bottom=rules.canvas_height - top - rules.gap,
    )


def power_up_due(state: GameState, rules: GameRules) -> bool:
    return (
        state.score != 0
        and state.score % rules.power_up_interval == 0
        and not state.power_ups
    )


def place_power_up(state: GameState, rules: GameRules) -> Optional[PowerUp]:
    """Centre a power-up in the gap of the nearest obstacle past mid-screen."""
    midpoint = rules.canvas_width / 2
    target = next((o for o in state.obstacles if o.x > midpoint), None)
    if target is None:
        return None

    size = state.avatar.width
    x = target.x + target.width / 2 - size / 2
    gap_height = rules.canvas_height - target.bottom - target.top
    y = gap_height / 2 + target.top - size / 2
    return PowerUp(x=x, y=y, size=size)


def spawn(state: GameState, rules: GameRules, rng: RandomSource) -> GameState:
    """Run the spawn rules for the tick numbered ``state.frame``."""
    obstacles = state.obstacles
    if state.frame % rules.spawn_interval == 0:
        obstacles = obstacles + (make_obstacle(rules, rng),)
        logger.debug(f"Obstacle spawned at frame {state.frame}")
    obstacles = tuple(o for o in obstacles if o.right > 0)
    state = replace(state, obstacles=obstacles)

    power_ups = state.power_ups
    if power_up_due(state, rules):
        power_up = place_power_up(state, rules)
        if power_up is not None:
            power_ups = (power_up,)
            logger.debug(f"Power-up placed at ({power_up.x:.0f}, {power_up.y:.0f})")
    power_ups = tuple(p for p in power_ups if p.x + p.size > 0)
    return replace(state, power_ups=power_ups)

"""Avatar integration and horizontal scrolling."""

from __future__ import annotations

from dataclasses import replace

from skyflap.game.entities import GameRules, GameState


def jump(state: GameState, rules: GameRules) -> GameState:
    """Apply the upward impulse. Overrides the current velocity."""
    if state.game_over:
        return state
    return replace(state, avatar=replace(state.avatar, velocity=rules.lift))


def out_of_bounds(state: GameState, rules: GameRules) -> bool:
    a = state.avatar
    return a.y < 0 or a.y + a.height > rules.canvas_height


def advance(state: GameState, rules: GameRules) -> GameState:
    """Integrate gravity, scroll obstacles and power-ups left.

    Leaving the playfield vertically ends the game; nothing is scrolled on
    that tick.
    """
    a = state.avatar
    velocity = a.velocity + rules.gravity
    avatar = replace(a, velocity=velocity, y=a.y + velocity)
    state = replace(state, avatar=avatar)

    if out_of_bounds(state, rules):
        return replace(state, game_over=True)

    dx = rules.scroll_speed
    obstacles = tuple(replace(o, x=o.x - dx) for o in state.obstacles)
    power_ups = tuple(replace(p, x=p.x - dx) for p in state.power_ups)
    return replace(state, obstacles=obstacles, power_ups=power_ups)

"""Collision checks, scoring, power-up collection and level progression."""

from __future__ import annotations

from dataclasses import replace

from skyflap.game.entities import GameRules, GameState, Obstacle


def hits_obstacle(state: GameState, obstacle: Obstacle, rules: GameRules) -> bool:
    box = state.avatar.box
    return any(box.overlaps(solid) for solid in obstacle.solid_boxes(rules.canvas_height))


def check_obstacles(state: GameState, rules: GameRules) -> GameState:
    """Score newly passed obstacles; any hit ends the game."""
    avatar = state.avatar
    score = state.score
    hit = state.game_over
    obstacles: list[Obstacle] = []

    for obstacle in state.obstacles:
        if hits_obstacle(state, obstacle, rules):
            hit = True
        if not obstacle.passed and obstacle.right < avatar.x:
            obstacle = replace(obstacle, passed=True)
            score += 1
        obstacles.append(obstacle)

    return replace(state, obstacles=tuple(obstacles), score=score, game_over=hit)


def clear_ahead(state: GameState, rules: GameRules) -> GameState:
    """Remove the first obstacles in front of the avatar."""
    removed = 0
    kept: list[Obstacle] = []
    for obstacle in state.obstacles:
        if obstacle.x > state.avatar.x and removed < rules.power_up_clear_count:
            removed += 1
            continue
        kept.append(obstacle)
    return replace(state, obstacles=tuple(kept))


def check_power_ups(state: GameState, rules: GameRules, now: float) -> GameState:
    box = state.avatar.box
    for power_up in state.power_ups:
        if box.overlaps(power_up.box):
            remaining = tuple(p for p in state.power_ups if p is not power_up)
            state = replace(
                state,
                power_ups=remaining,
                power_up_expires_at=now + rules.power_up_duration,
            )
            return clear_ahead(state, rules)
    return state


def expire_power_up(state: GameState, now: float) -> GameState:
    if state.power_up_expires_at is not None and now >= state.power_up_expires_at:
        return replace(state, power_up_expires_at=None)
    return state


def progress_level(state: GameState, rules: GameRules) -> GameState:
    level = state.level
    threshold = state.next_level_score
    while state.score >= threshold:
        level += 1
        threshold += level * rules.level_step
    if level == state.level:
        return state
    return replace(state, level=level, next_level_score=threshold)


def evaluate(state: GameState, rules: GameRules, now: float) -> GameState:
    state = check_obstacles(state, rules)
    if state.game_over:
        return state
    state = check_power_ups(state, rules, now)
    return progress_level(state, rules)

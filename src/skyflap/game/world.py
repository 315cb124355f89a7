from __future__ import annotations

from dataclasses import replace

from skyflap.game import collision, physics, spawner
from skyflap.game.entities import GameRules, GameState, RandomSource, new_game


class World:
    """Pure per-tick simulation: update, spawn, evaluate."""

    def __init__(self, rules: GameRules, rng: RandomSource) -> None:
        self.rules = rules
        self.rng = rng

    def new_game(self) -> GameState:
        return new_game(self.rules)

    def jump(self, state: GameState) -> GameState:
        return physics.jump(state, self.rules)

    def step(self, state: GameState, now: float) -> GameState:
        if state.game_over:
            return state

        state = collision.expire_power_up(state, now)

        # ----- Updater -----
        state = physics.advance(state, self.rules)
        if not state.game_over:
            # ----- Spawner -----
            state = spawner.spawn(state, self.rules, self.rng)
            # ----- Evaluator -----
            state = collision.evaluate(state, self.rules, now)

        return replace(state, frame=state.frame + 1)

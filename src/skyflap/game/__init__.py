"""Simulation for SKYFLAP."""

from skyflap.game.entities import (
    Avatar,
    Box,
    GameRules,
    GameState,
    Obstacle,
    PowerUp,
    new_game,
)
from skyflap.game.world import World
from skyflap.game.session import GameSession

__all__ = [
    "Avatar",
    "Box",
    "GameRules",
    "GameState",
    "Obstacle",
    "PowerUp",
    "new_game",
    "World",
    "GameSession",
]

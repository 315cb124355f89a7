"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups use a double underscore, e.g. ``SKYFLAP_GAME__GRAVITY=0.5``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from skyflap.game.entities import GameRules


class GameSettings(BaseModel):
    """Gameplay constants, in playfield pixels and ticks."""

    # Playfield (2:3 aspect)
    canvas_width: int = Field(default=320, gt=0)
    canvas_height: int = Field(default=480, gt=0)

    # Avatar
    avatar_x: float = 50.0
    avatar_y: float = 150.0
    avatar_size: float = Field(default=20.0, gt=0)
    gravity: float = 0.6
    lift: float = -10.0  # Less intense jump

    # Obstacles
    scroll_speed: float = Field(default=2.0, gt=0)
    spawn_interval: int = Field(default=90, gt=0)
    obstacle_width: float = Field(default=40.0, gt=0)
    gap: float = 350.0  # Larger gap

    # Power-ups
    power_up_interval: int = Field(default=5, gt=0)
    power_up_clear_count: int = Field(default=10, ge=0)
    power_up_duration: float = Field(default=5.0, ge=0.0)  # seconds

    # Levels
    initial_level: int = 1
    initial_threshold: int = 10
    level_step: int = Field(default=10, gt=0)

    def to_rules(self) -> GameRules:
        """Build the immutable rule set used by the simulation."""
        return GameRules(**self.model_dump())


class DisplaySettings(BaseModel):
    """Window-related settings."""

    title: str = "Skyflap"
    window_width: int = Field(default=480, gt=0)
    window_height: int = Field(default=720, gt=0)
    fullscreen: bool = False
    fps: int = Field(default=60, gt=0)


class AudioSettings(BaseModel):
    """Sound settings."""

    enabled: bool = True
    volume: float = Field(default=0.8, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SKYFLAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    log_file: Optional[Path] = None

    # Nested settings
    game: GameSettings = Field(default_factory=GameSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

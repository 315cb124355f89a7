"""Configuration for SKYFLAP."""

from skyflap.config.settings import (
    AudioSettings,
    DisplaySettings,
    GameSettings,
    Settings,
    get_settings,
)

__all__ = ["Settings", "GameSettings", "DisplaySettings", "AudioSettings", "get_settings"]

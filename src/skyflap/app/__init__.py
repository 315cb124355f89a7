"""Desktop application shell for SKYFLAP."""

from skyflap.app.window import GameWindow, key_to_event

__all__ = ["GameWindow", "key_to_event"]

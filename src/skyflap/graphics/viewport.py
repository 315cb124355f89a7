"""Fixed-aspect viewport fitting for the game window."""

from dataclasses import dataclass
from typing import Tuple

# Playfield aspect ratio (width / height)
ASPECT_RATIO = 320 / 480


@dataclass(frozen=True)
class Viewport:
    """Where the scaled playfield sits inside the window."""

    x: int
    y: int
    width: int
    height: int

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def to_playfield(
        self, px: int, py: int, field_width: int, field_height: int
    ) -> Tuple[float, float]:
        """Map window pixel coordinates to playfield coordinates."""
        fx = (px - self.x) * field_width / self.width
        fy = (py - self.y) * field_height / self.height
        return fx, fy


def fit_size(window_width: int, window_height: int, aspect: float = ASPECT_RATIO) -> Tuple[int, int]:
    """Largest aspect-preserving size fitting inside the window."""
    if window_width <= 0 or window_height <= 0:
        return 0, 0  # Minimized

    width = float(window_width)
    height = float(window_height)

    if width / height > aspect:
        width = height * aspect
    else:
        height = width / aspect

    return int(round(width)), int(round(height))


def fit_viewport(window_width: int, window_height: int, aspect: float = ASPECT_RATIO) -> Viewport:
    """Fitted size, centered (letterboxed) in the window."""
    width, height = fit_size(window_width, window_height, aspect)
    return Viewport(
        x=(window_width - width) // 2,
        y=(window_height - height) // 2,
        width=width,
        height=height,
    )

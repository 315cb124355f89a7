"""Graphics module for SKYFLAP rendering pipeline."""

from skyflap.graphics.renderer import GameRenderer
from skyflap.graphics.primitives import (
    draw_centered_text,
    draw_rect,
    draw_text,
    fill,
    measure_text,
    new_buffer,
)
from skyflap.graphics.viewport import Viewport, fit_size, fit_viewport

__all__ = [
    # Renderer
    "GameRenderer",
    # Primitives
    "draw_rect",
    "draw_text",
    "draw_centered_text",
    "measure_text",
    "fill",
    "new_buffer",
    # Viewport
    "Viewport",
    "fit_size",
    "fit_viewport",
]

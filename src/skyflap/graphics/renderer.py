"""Frame renderer for SKYFLAP."""

import logging
from typing import Optional

from skyflap.game.entities import Box, GameState
from skyflap.graphics.primitives import (
    Buffer,
    draw_centered_text,
    draw_rect,
    draw_text,
    fill,
    new_buffer,
)

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)
AVATAR = (255, 255, 0)     # yellow
OBSTACLE = (0, 128, 0)     # green
POWER_UP = (0, 0, 255)     # blue
HUD_TEXT = (255, 255, 255)
POWER_TEXT = (120, 170, 255)
GAME_OVER_TEXT = (255, 0, 0)
BUTTON_FILL = (60, 60, 80)
BUTTON_BORDER = (200, 200, 220)

HUD_SCALE = 3
TITLE_SCALE = 5
BUTTON_SCALE = 3


class GameRenderer:
    """Draws a GameState into an (height, width, 3) frame buffer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._buffer = new_buffer(width, height)

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    def restart_button(self) -> Box:
        """Clickable restart area, in playfield coordinates."""
        w, h = 140, 40
        return Box(
            x=(self.width - w) / 2,
            y=self.height / 2,
            width=w,
            height=h,
        )

    def render(self, state: GameState, buffer: Optional[Buffer] = None) -> Buffer:
        """Clear and redraw the whole frame."""
        if buffer is None:
            buffer = self._buffer
        fill(buffer, BACKGROUND)

        if state.game_over:
            self._render_game_over(buffer)
            return buffer

        self._render_avatar(buffer, state)
        self._render_obstacles(buffer, state)
        self._render_power_ups(buffer, state)
        self._render_hud(buffer, state)
        return buffer

    def _render_avatar(self, buffer: Buffer, state: GameState) -> None:
        a = state.avatar
        draw_rect(buffer, int(a.x), int(a.y), int(a.width), int(a.height), AVATAR)

    def _render_obstacles(self, buffer: Buffer, state: GameState) -> None:
        for o in state.obstacles:
            x, w = int(o.x), int(o.width)
            draw_rect(buffer, x, 0, w, int(o.top), OBSTACLE)
            # A non-positive bottom draws nothing
            draw_rect(buffer, x, int(self.height - o.bottom), w, int(o.bottom), OBSTACLE)

    def _render_power_ups(self, buffer: Buffer, state: GameState) -> None:
        for p in state.power_ups:
            size = int(p.size)
            draw_rect(buffer, int(p.x), int(p.y), size, size, POWER_UP)

    def _render_hud(self, buffer: Buffer, state: GameState) -> None:
        draw_text(buffer, f"Score: {state.score}", 10, 10, HUD_TEXT, scale=HUD_SCALE)
        draw_text(buffer, f"Level: {state.level}", 10, 40, HUD_TEXT, scale=HUD_SCALE)
        if state.power_up_active:
            draw_text(buffer, "POWER", 10, 70, POWER_TEXT, scale=HUD_SCALE)

    def _render_game_over(self, buffer: Buffer) -> None:
        title_y = self.height // 2 - 60 - (5 * TITLE_SCALE) // 2
        draw_centered_text(buffer, "Game Over", title_y, GAME_OVER_TEXT, scale=TITLE_SCALE)

        button = self.restart_button()
        bx, by = int(button.x), int(button.y)
        bw, bh = int(button.width), int(button.height)
        draw_rect(buffer, bx, by, bw, bh, BUTTON_FILL)
        draw_rect(buffer, bx, by, bw, bh, BUTTON_BORDER, filled=False, thickness=2)
        label_y = by + (bh - 5 * BUTTON_SCALE) // 2
        draw_centered_text(buffer, "Restart", label_y, HUD_TEXT, scale=BUTTON_SCALE)

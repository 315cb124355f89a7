"""
Main game window using pygame.

Owns the display surface and the frame loop. Input is queued on the event
bus and drained once per frame just before the TICK, then the session's
state is rendered and scaled into a fixed-aspect viewport.
"""

import pygame
import asyncio
import logging
from typing import Optional

from ..config.settings import DisplaySettings
from ..core.events import EventBus, Event, EventType, flap_event, restart_click_event, tick_event
from ..game.session import GameSession
from ..graphics.renderer import GameRenderer
from ..graphics.viewport import Viewport, fit_viewport

logger = logging.getLogger(__name__)

# Space, W and Up all flap
FLAP_KEYS = (pygame.K_SPACE, pygame.K_w, pygame.K_UP)
FULLSCREEN_KEY = pygame.K_F11
QUIT_KEY = pygame.K_ESCAPE

LETTERBOX_COLOR = (0, 0, 0)


def key_to_event(key: int) -> Optional[Event]:
    """Map a pygame key code to a game input event, if it is one."""
    if key in FLAP_KEYS:
        return flap_event()
    return None


class GameWindow:
    """
    Desktop window running the game loop.

    Keyboard Mapping:
        SPACE / W / UP: Jump (restart after game over)
        F11: Toggle fullscreen
        ESC: Quit
    Mouse:
        Click the restart button on the game over screen
    """

    def __init__(
        self,
        session: GameSession,
        event_bus: EventBus,
        config: Optional[DisplaySettings] = None,
    ) -> None:
        self.config = config or DisplaySettings()
        self.session = session
        self.event_bus = event_bus

        rules = session.world.rules
        self.renderer = GameRenderer(rules.canvas_width, rules.canvas_height)

        # Pygame setup
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._fullscreen = self.config.fullscreen
        self._windowed_size = (self.config.window_width, self.config.window_height)
        self._viewport = fit_viewport(*self._windowed_size)

        logger.info("GameWindow created")

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._set_mode()
        self._clock = pygame.time.Clock()
        logger.info(f"Pygame initialized: {self._screen.get_width()}x{self._screen.get_height()}")

    def _set_mode(self) -> None:
        if self._fullscreen:
            info = pygame.display.Info()
            size = (info.current_w, info.current_h)
            flags = pygame.FULLSCREEN | pygame.DOUBLEBUF
        else:
            size = self._windowed_size
            flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self._screen = pygame.display.set_mode(size, flags)
        self._resize(*self._screen.get_size())

    def _resize(self, width: int, height: int) -> None:
        """Recompute the viewport for a new window size."""
        self._viewport = fit_viewport(width, height)
        logger.debug(f"Viewport: {self._viewport}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.VIDEORESIZE:
                if not self._fullscreen:
                    self._windowed_size = (event.w, event.h)
                self._resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(*event.pos)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == QUIT_KEY:
            self._running = False
        elif key == FULLSCREEN_KEY:
            self._toggle_fullscreen()
        else:
            game_event = key_to_event(key)
            if game_event is not None:
                self.event_bus.queue_event(game_event)

    def _handle_click(self, px: int, py: int) -> None:
        """Restart when the button on the game over screen is clicked."""
        if not self.session.state.game_over or self._viewport.is_empty:
            return

        rules = self.session.world.rules
        fx, fy = self._viewport.to_playfield(px, py, rules.canvas_width, rules.canvas_height)
        button = self.renderer.restart_button()
        if button.x <= fx <= button.x + button.width and button.y <= fy <= button.y + button.height:
            self.event_bus.queue_event(restart_click_event())

    def _toggle_fullscreen(self) -> None:
        """Toggle fullscreen mode. Best-effort: failures keep the current mode."""
        self._fullscreen = not self._fullscreen
        try:
            self._set_mode()
        except pygame.error as e:
            logger.warning(f"Fullscreen toggle failed: {e}")
            self._fullscreen = not self._fullscreen
            return
        logger.info(f"Fullscreen: {self._fullscreen}")

    def _render(self) -> None:
        """Render the current state and present it."""
        if not self._screen:
            return

        self._screen.fill(LETTERBOX_COLOR)

        if not self._viewport.is_empty:
            buffer = self.renderer.render(self.session.state)
            frame = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
            if frame.get_size() != self._viewport.size:
                frame = pygame.transform.scale(frame, self._viewport.size)
            self._screen.blit(frame, (self._viewport.x, self._viewport.y))

        pygame.display.flip()

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game started")

        while self._running:
            # Handle events
            self._handle_events()

            # Apply queued input before stepping the game
            await self.event_bus.process_queue()
            self.event_bus.emit(tick_event())

            # Render
            self._render()

            # Frame timing
            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Game window closed")

    def stop(self) -> None:
        """Stop the loop after the current frame."""
        self._running = False

"""
Main entry point for SKYFLAP.

Loads settings, wires the session, audio and window together over the
event bus, and runs the frame loop.
"""

import asyncio
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from skyflap.config.settings import Settings, get_settings
from skyflap.core.events import EventBus
from skyflap.core.state import StateMachine

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure logging to the console, and to a file when one is given."""
    level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        # Truncate on each run for fresh logs
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )

    # Per-tick spawn messages are noisy even in debug
    logging.getLogger("skyflap.game.spawner").setLevel(logging.INFO)


async def run_game(settings: Settings) -> None:
    """Build all components and run until the window closes."""
    from skyflap.app.window import GameWindow
    from skyflap.audio.engine import get_audio_engine
    from skyflap.game.session import GameSession
    from skyflap.game.world import World

    # Create shared components
    event_bus = EventBus()
    state_machine = StateMachine()

    world = World(settings.game.to_rules(), random.Random())
    session = GameSession(world, event_bus, state_machine)
    session.attach()

    # Audio is optional; the game runs silently without a mixer
    audio = get_audio_engine()
    if settings.audio.enabled:
        audio.set_volume(settings.audio.volume)
        if audio.init():
            audio.attach(event_bus)

    window = GameWindow(session=session, event_bus=event_bus, config=settings.display)
    try:
        await window.run()
    finally:
        session.detach()
        audio.cleanup()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid settings: {e}")
        sys.exit(1)

    setup_logging(settings.debug, settings.log_file)
    logger.info("SKYFLAP starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("SKYFLAP stopped")


if __name__ == "__main__":
    main()

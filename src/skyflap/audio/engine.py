"""
SKYFLAP Audio Engine - synthesized chiptune cues.

All sounds are generated at startup from simple waveforms, so the game
ships without audio assets. Playback is best-effort: if the mixer is
unavailable the game runs silently.
"""

import pygame
import array
import math
import logging
from typing import Callable, Dict, List, Optional

from skyflap.core.events import Event, EventBus, EventType

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def to_pcm(value: float) -> int:
    """Clamp a [-1, 1] sample to signed 16 bit."""
    return int(max(-1.0, min(1.0, value)) * 32767)


def game_over_samples() -> array.array:
    """Sad descending tone."""
    samples = array.array('h')
    for i in range(int(SAMPLE_RATE * 0.6)):
        t = i / SAMPLE_RATE
        freq = 440 - t * 300
        env = max(0, 1 - t * 1.7)
        val = square(t, freq) * 0.25 + sine(t, freq / 2) * 0.15
        samples.append(to_pcm(val * env))
    return samples


def score_samples() -> array.array:
    """Quick rising blip."""
    samples = array.array('h')
    for i in range(int(SAMPLE_RATE * 0.08)):
        t = i / SAMPLE_RATE
        freq = 800 + t * 4000
        env = max(0, 1 - t * 15)
        samples.append(to_pcm(square(t, freq) * 0.2 * env))
    return samples


def level_up_samples() -> array.array:
    """Triumphant arpeggio."""
    samples = array.array('h')
    notes = [523, 659, 784, 1047]
    for i in range(int(SAMPLE_RATE * 0.4)):
        t = i / SAMPLE_RATE
        note_idx = min(int(t * 10), len(notes) - 1)
        env = max(0, 1 - (t - note_idx * 0.1) * 5)
        samples.append(to_pcm(square(t, notes[note_idx]) * 0.25 * env))
    return samples


def power_up_samples() -> array.array:
    """Sparkly run up the scale."""
    samples = array.array('h')
    notes = [523, 659, 784, 1047, 1319]
    for i in range(int(SAMPLE_RATE * 0.5)):
        t = i / SAMPLE_RATE
        note_idx = min(int(t * 15), len(notes) - 1)
        val = square(t, notes[note_idx]) * 0.2 + sine(t, notes[note_idx] * 2) * 0.1
        samples.append(to_pcm(val * max(0, 1 - t * 2)))
    return samples


SOUND_GENERATORS: Dict[str, Callable[[], array.array]] = {
    "game_over": game_over_samples,
    "score_up": score_samples,
    "level_up": level_up_samples,
    "power_up": power_up_samples,
}

# Which cue plays for which bus event
EVENT_SOUNDS: Dict[EventType, str] = {
    EventType.GAME_OVER: "game_over",
    EventType.SCORE_CHANGED: "score_up",
    EventType.LEVEL_UP: "level_up",
    EventType.POWER_UP_COLLECTED: "power_up",
}


class AudioEngine:
    """Generates and plays the game's sound cues."""

    def __init__(self, volume: float = 0.8):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._volume = max(0.0, min(1.0, volume))
        self._unsubscribers: List[Callable[[], None]] = []

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and generate all sounds."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
            self._generate_all_sounds()
            self._initialized = True
            logger.info(f"Audio engine initialized ({len(self._sounds)} sounds)")
            return True
        except pygame.error as e:
            logger.warning(f"Audio unavailable, running silent: {e}")
            return False

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _generate_all_sounds(self) -> None:
        for name, generator in SOUND_GENERATORS.items():
            self._sounds[name] = self._create_sound(generator())

    # ===== PLAYBACK API =====

    def play(self, sound_name: str, volume: float = 1.0) -> Optional[pygame.mixer.Channel]:
        """Play a sound effect. Fire-and-forget; failures are ignored."""
        if not self._initialized:
            return None

        sound = self._sounds.get(sound_name)
        if not sound:
            logger.warning(f"Sound not found: {sound_name}")
            return None

        try:
            sound.set_volume(volume * self._volume)
            return sound.play()
        except pygame.error as e:
            logger.debug(f"Playback of {sound_name} failed: {e}")
            return None

    def set_volume(self, volume: float) -> None:
        """Set master volume (0.0 - 1.0)."""
        self._volume = max(0.0, min(1.0, volume))

    def get_volume(self) -> float:
        return self._volume

    # ===== EVENT WIRING =====

    def attach(self, event_bus: EventBus) -> None:
        """Play a cue for each game event."""
        for event_type in EVENT_SOUNDS:
            self._unsubscribers.append(event_bus.subscribe(event_type, self._on_event))

    def _on_event(self, event: Event) -> None:
        sound_name = EVENT_SOUNDS.get(event.type)
        if sound_name:
            self.play(sound_name)

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")


# Global audio engine instance
_audio_engine: Optional[AudioEngine] = None


def get_audio_engine() -> AudioEngine:
    """Get the global audio engine instance."""
    global _audio_engine
    if _audio_engine is None:
        _audio_engine = AudioEngine()
    return _audio_engine

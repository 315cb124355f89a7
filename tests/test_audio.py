import pytest

from skyflap.audio.engine import EVENT_SOUNDS, SOUND_GENERATORS, AudioEngine
from skyflap.core.events import Event, EventType


def test_play_without_mixer_is_silent():
    engine = AudioEngine()
    assert not engine.is_initialized
    assert engine.play("game_over") is None


@pytest.mark.parametrize("name", sorted(SOUND_GENERATORS))
def test_generated_samples_are_pcm16(name):
    samples = SOUND_GENERATORS[name]()
    assert samples.typecode == 'h'
    assert len(samples) > 0
    assert max(samples) <= 32767 and min(samples) >= -32767


def test_every_event_cue_exists():
    assert set(EVENT_SOUNDS.values()) <= set(SOUND_GENERATORS)


def test_game_over_event_triggers_cue(bus, monkeypatch):
    engine = AudioEngine()
    played = []
    monkeypatch.setattr(engine, "play", lambda name, volume=1.0: played.append(name))

    engine.attach(bus)
    bus.emit(Event(EventType.GAME_OVER))
    bus.emit(Event(EventType.TICK))
    engine.cleanup()
    bus.emit(Event(EventType.GAME_OVER))

    assert played == ["game_over"]


def test_volume_is_clamped():
    engine = AudioEngine(volume=3.0)
    assert engine.get_volume() == 1.0
    engine.set_volume(-1.0)
    assert engine.get_volume() == 0.0


class FakeSound:
    def __init__(self):
        self.volume = None
        self.plays = 0

    def set_volume(self, volume):
        self.volume = volume

    def play(self):
        self.plays += 1
        return "channel"


def test_play_scales_by_master_volume():
    engine = AudioEngine(volume=0.5)
    sound = FakeSound()
    engine._sounds["score_up"] = sound
    engine._initialized = True

    assert engine.play("score_up", volume=0.5) == "channel"
    assert sound.volume == 0.25
    assert sound.plays == 1


def test_play_unknown_sound_returns_none():
    engine = AudioEngine()
    engine._initialized = True
    assert engine.play("missing") is None

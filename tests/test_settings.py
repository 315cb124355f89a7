import pytest
from pydantic import ValidationError

from skyflap.config.settings import GameSettings, Settings
from skyflap.game.entities import GameRules


def test_defaults_match_rules():
    assert GameSettings().to_rules() == GameRules()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SKYFLAP_DEBUG", "true")
    monkeypatch.setenv("SKYFLAP_GAME__GRAVITY", "0.4")
    monkeypatch.setenv("SKYFLAP_DISPLAY__FPS", "30")
    monkeypatch.setenv("SKYFLAP_AUDIO__ENABLED", "false")

    settings = Settings(_env_file=None)

    assert settings.debug
    assert settings.game.gravity == 0.4
    assert settings.game.to_rules().gravity == 0.4
    assert settings.display.fps == 30
    assert not settings.audio.enabled


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("SKYFLAP_GAME__SPAWN_INTERVAL", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_volume_range():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, audio={"volume": 1.5})

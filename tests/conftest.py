import pygame
import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

EYEBLINK_ENV_VARS = (
    "EYEBLINK_BACKGROUND_MODE",
    "EYEBLINK_BLINK_MODE",
    "EYEBLINK_BLINK_SPEED",
    "EYEBLINK_WAVE_EPSILON",
)


@pytest.fixture(autouse=True)
def clean_eyeblink_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Start each test from default configuration; mutates env vars per test."""

    for name in EYEBLINK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("EYEBLINK_LOG_DIR", str(tmp_path / "logs"))
    yield


@pytest.fixture(autouse=True)
def init_pygame(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield

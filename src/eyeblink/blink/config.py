from __future__ import annotations

from dataclasses import dataclass

from eyeblink.blink.constants import DEFAULT_BLINK_SPEED, DEFAULT_WAVE_EPSILON
from eyeblink.utilities.env import BackgroundMode, BlinkMode, Configuration


@dataclass(frozen=True)
class BlinkConfiguration:
    """Process-wide effect settings, fixed once resolved at startup."""

    background_mode: BackgroundMode = BackgroundMode.WHITE_FILL
    blink_mode: BlinkMode = BlinkMode.SHARP
    speed: float = DEFAULT_BLINK_SPEED
    wave_epsilon: float = DEFAULT_WAVE_EPSILON

    def __post_init__(self) -> None:
        if self.speed <= 0:
            raise ValueError("speed must be greater than 0")
        if self.wave_epsilon <= 0:
            raise ValueError("wave_epsilon must be greater than 0")

    @classmethod
    def from_env(cls) -> BlinkConfiguration:
        return cls(
            background_mode=Configuration.background_mode(),
            blink_mode=Configuration.blink_mode(),
            speed=Configuration.blink_speed(),
            wave_epsilon=Configuration.wave_epsilon(),
        )

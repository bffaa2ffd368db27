"""Periodic blink drivers.

A blink wave maps elapsed time to the sharpness of the vignette falloff.
Large values leave the background untouched, values near zero collapse
everything but the frame center to black.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

import numpy as np

from eyeblink.blink.constants import (DEFAULT_BLINK_SPEED,
                                      SHARP_BLINK_AMPLITUDE,
                                      SMOOTH_BLINK_AMPLITUDE)
from eyeblink.blink.vignette import ArrayLike
from eyeblink.utilities.env.enums import BlinkMode


@runtime_checkable
class BlinkWaveFunction(Protocol):
    speed: float
    amplitude: float

    def __call__(self, time: ArrayLike) -> ArrayLike: ...


@dataclass(frozen=True)
class SharpBlinkWave:
    """``|sin(t * speed)| * amplitude``; reaches zero with a non-zero slope."""

    speed: float = DEFAULT_BLINK_SPEED
    amplitude: float = SHARP_BLINK_AMPLITUDE

    def __call__(self, time: ArrayLike) -> ArrayLike:
        return np.abs(np.sin(np.multiply(time, self.speed))) * self.amplitude


@dataclass(frozen=True)
class SmoothBlinkWave:
    """``sin(t * speed) ** 2 * amplitude``; reaches zero with zero slope."""

    speed: float = DEFAULT_BLINK_SPEED
    amplitude: float = SMOOTH_BLINK_AMPLITUDE

    def __call__(self, time: ArrayLike) -> ArrayLike:
        phase = np.sin(np.multiply(time, self.speed))
        return phase * phase * self.amplitude


BLINK_WAVES: dict[BlinkMode, Callable[[float], BlinkWaveFunction]] = {
    BlinkMode.SHARP: lambda speed: SharpBlinkWave(speed=speed),
    BlinkMode.SMOOTH: lambda speed: SmoothBlinkWave(speed=speed),
}


def build_blink_wave(
    mode: BlinkMode, speed: float = DEFAULT_BLINK_SPEED
) -> BlinkWaveFunction:
    try:
        factory = BLINK_WAVES[BlinkMode(mode)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown blink mode: {mode!r}") from exc
    return factory(speed)

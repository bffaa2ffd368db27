from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Sequence

import numpy as np

from eyeblink.blink.config import BlinkConfiguration
from eyeblink.blink.constants import DEFAULT_WAVE_EPSILON, VIGNETTE_COEFFICIENT
from eyeblink.blink.vignette import (ArrayLike, normalize, pixel_centers,
                                      vignette)
from eyeblink.blink.waves import BlinkWaveFunction, build_blink_wave
from eyeblink.utilities.env.enums import BlinkMode


@dataclass(frozen=True)
class FrameContext:
    """Per-invocation inputs supplied by the host."""

    resolution: tuple[float, float]
    time: float
    pixel_coord: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        _validate_resolution(self.resolution)


def _validate_resolution(resolution: Sequence[float]) -> None:
    width, height = resolution
    if width <= 0 or height <= 0:
        raise ValueError(f"Resolution must be positive, got {tuple(resolution)}")


def blink_intensity(
    mask: ArrayLike,
    wave: ArrayLike,
    epsilon: float = DEFAULT_WAVE_EPSILON,
) -> ArrayLike:
    """Raise ``mask`` to ``1 / wave`` and clip the result to ``[0, 1]``.

    ``wave`` is floored at ``epsilon`` so the blink instants, where the wave
    touches zero, collapse to (near) black instead of dividing by zero.
    """

    floored_wave = np.maximum(wave, epsilon)
    base = np.clip(mask, 0.0, 1.0)
    return np.clip(np.power(base, 1.0 / floored_wave), 0.0, 1.0)


class BlinkIntensityEvaluator:
    """Maps (pixel, resolution, time) to a darkening factor in ``[0, 1]``.

    Stateless apart from the strategy it was built with, so instances can
    be shared freely between workers.
    """

    def __init__(
        self,
        wave: BlinkWaveFunction,
        *,
        epsilon: float = DEFAULT_WAVE_EPSILON,
        coefficient: float = VIGNETTE_COEFFICIENT,
    ) -> None:
        if epsilon <= 0:
            raise ValueError("epsilon must be greater than 0")
        self.wave = wave
        self.epsilon = epsilon
        self.coefficient = coefficient

    @classmethod
    def from_configuration(
        cls, configuration: BlinkConfiguration
    ) -> BlinkIntensityEvaluator:
        return cls(
            build_blink_wave(configuration.blink_mode, configuration.speed),
            epsilon=configuration.wave_epsilon,
        )

    def intensity(self, u: ArrayLike, v: ArrayLike, time: ArrayLike) -> ArrayLike:
        return blink_intensity(
            vignette(u, v, self.coefficient), self.wave(time), self.epsilon
        )

    def evaluate(
        self,
        pixel_coord: Sequence[float],
        resolution: Sequence[float],
        time: float,
    ) -> float:
        u, v = normalize(pixel_coord, resolution)
        return float(self.intensity(u, v, time))

    def evaluate_context(self, context: FrameContext) -> float:
        return self.evaluate(context.pixel_coord, context.resolution, context.time)

    def evaluate_field(self, resolution: Sequence[float], time: float) -> np.ndarray:
        """Evaluate every pixel center of a frame; returns a ``(height, width)`` array."""

        _validate_resolution(resolution)
        u, v = pixel_centers(resolution)
        return np.asarray(self.intensity(u, v, time))


@lru_cache(maxsize=None)
def _evaluator_for(
    blink_mode: BlinkMode, speed: float, epsilon: float
) -> BlinkIntensityEvaluator:
    return BlinkIntensityEvaluator(build_blink_wave(blink_mode, speed), epsilon=epsilon)


def evaluate(
    pixel_coord: Sequence[float],
    resolution: Sequence[float],
    time: float,
    config: BlinkConfiguration | None = None,
) -> float:
    """Blink intensity for a single pixel under ``config``."""

    config = config or BlinkConfiguration()
    evaluator = _evaluator_for(config.blink_mode, config.speed, config.wave_epsilon)
    return evaluator.evaluate(pixel_coord, resolution, time)

from __future__ import annotations

from typing import Sequence

import numpy as np

from eyeblink.blink.background import BackgroundSource, build_background
from eyeblink.blink.compositor import composite, composite_rgba
from eyeblink.blink.config import BlinkConfiguration
from eyeblink.blink.evaluator import BlinkIntensityEvaluator
from eyeblink.blink.vignette import normalize, pixel_centers
from eyeblink.utilities.logging import get_logger

logger = get_logger(__name__)


class BlinkEffect:
    """Background sample times blink intensity, for whole frames."""

    def __init__(
        self, evaluator: BlinkIntensityEvaluator, background: BackgroundSource
    ) -> None:
        self.evaluator = evaluator
        self.background = background

    @classmethod
    def from_configuration(
        cls,
        configuration: BlinkConfiguration,
        texture: np.ndarray | None = None,
    ) -> BlinkEffect:
        logger.info(
            "Building blink effect: blink=%s background=%s speed=%s epsilon=%s",
            configuration.blink_mode,
            configuration.background_mode,
            configuration.speed,
            configuration.wave_epsilon,
        )
        return cls(
            BlinkIntensityEvaluator.from_configuration(configuration),
            build_background(configuration.background_mode, texture),
        )

    def _background_field(self, resolution: Sequence[float]) -> np.ndarray:
        return self.background.sample(*pixel_centers(resolution))

    def shade(
        self,
        pixel_coord: Sequence[float],
        resolution: Sequence[float],
        time: float,
    ) -> np.ndarray:
        """Composited RGB for a single pixel."""

        intensity = self.evaluator.evaluate(pixel_coord, resolution, time)
        u, v = normalize(pixel_coord, resolution)
        return composite(self.background.sample(u, v), intensity)

    def render(self, resolution: Sequence[float], time: float) -> np.ndarray:
        """Float RGB frame of shape ``(height, width, 3)`` in ``[0, 1]``."""

        intensity = self.evaluator.evaluate_field(resolution, time)
        return composite(self._background_field(resolution), intensity)

    def render_rgba(self, resolution: Sequence[float], time: float) -> np.ndarray:
        intensity = self.evaluator.evaluate_field(resolution, time)
        return composite_rgba(self._background_field(resolution), intensity)

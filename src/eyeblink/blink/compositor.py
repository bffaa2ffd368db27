from __future__ import annotations

import numpy as np

from eyeblink.blink.constants import OUTPUT_COVERAGE
from eyeblink.blink.vignette import ArrayLike


def composite(background_sample: np.ndarray, intensity: ArrayLike) -> np.ndarray:
    """Scale each RGB channel of ``background_sample`` by ``intensity``."""

    background = np.asarray(background_sample, dtype=np.float64)
    return background * np.asarray(intensity, dtype=np.float64)[..., None]


def composite_rgba(
    background_sample: np.ndarray,
    intensity: ArrayLike,
    coverage: float = OUTPUT_COVERAGE,
) -> np.ndarray:
    rgb = composite(background_sample, intensity)
    alpha = np.full(rgb.shape[:-1] + (1,), coverage, dtype=np.float64)
    return np.concatenate([rgb, alpha], axis=-1)

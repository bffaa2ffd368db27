from __future__ import annotations

from typing import Sequence

import numpy as np

from eyeblink.blink.constants import VIGNETTE_COEFFICIENT

ArrayLike = float | np.ndarray


def normalize(
    pixel_coord: Sequence[ArrayLike], resolution: Sequence[float]
) -> tuple[ArrayLike, ArrayLike]:
    """Rescale device-pixel coordinates to the unit square.

    The caller guarantees both resolution components are positive.
    """

    x, y = pixel_coord
    width, height = resolution
    return np.divide(x, width), np.divide(y, height)


def parabola(t: ArrayLike, coefficient: float = VIGNETTE_COEFFICIENT) -> ArrayLike:
    """``coefficient * t * (1 - t)``: zero at 0 and 1, ``coefficient / 4`` at 0.5."""

    return coefficient * t * (1.0 - t)


def vignette(
    u: ArrayLike, v: ArrayLike, coefficient: float = VIGNETTE_COEFFICIENT
) -> ArrayLike:
    """Separable biquadratic mask, zero on every edge and peaking at the center.

    The horizontal and vertical parabolas are combined with a geometric mean
    so the center value equals the per-axis peak. Axes falling outside the
    unit square contribute zero.
    """

    horizontal = np.maximum(parabola(u, coefficient), 0.0)
    vertical = np.maximum(parabola(v, coefficient), 0.0)
    return np.sqrt(horizontal * vertical)


def vignette_peak(coefficient: float = VIGNETTE_COEFFICIENT) -> float:
    return coefficient / 4.0


def pixel_centers(resolution: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    """Normalized pixel-center grids, shaped ``(1, width)`` and ``(height, 1)``."""

    width, height = resolution
    u = (np.arange(int(round(width)), dtype=np.float64) + 0.5) / width
    v = (np.arange(int(round(height)), dtype=np.float64) + 0.5) / height
    return u[None, :], v[:, None]

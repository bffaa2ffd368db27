from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import pygame

from eyeblink.blink.constants import WHITE
from eyeblink.blink.vignette import ArrayLike
from eyeblink.utilities.env.enums import BackgroundMode


class BackgroundSource(ABC):
    """Supplies the RGB sample an intensity is applied to."""

    @abstractmethod
    def sample(self, u: ArrayLike, v: ArrayLike) -> np.ndarray:
        """Return RGB samples with shape ``broadcast(u, v).shape + (3,)``."""


class WhiteFillBackground(BackgroundSource):
    def sample(self, u: ArrayLike, v: ArrayLike) -> np.ndarray:
        shape = np.broadcast_shapes(np.shape(u), np.shape(v))
        return np.broadcast_to(np.asarray(WHITE), shape + (3,)).copy()


class TexturedBackground(BackgroundSource):
    """Nearest-neighbor lookup into an RGB texture, clamped at the edges.

    ``texture`` is indexed ``[row, column]``; float textures are taken as
    already normalized, integer textures are scaled from ``0..255``.
    """

    def __init__(self, texture: np.ndarray) -> None:
        texture = np.asarray(texture)
        if texture.ndim != 3 or texture.shape[2] != 3:
            raise ValueError(
                f"Texture must have shape (height, width, 3), got {texture.shape}"
            )
        if texture.shape[0] == 0 or texture.shape[1] == 0:
            raise ValueError("Texture must not be empty")
        if np.issubdtype(texture.dtype, np.integer):
            texture = texture.astype(np.float64) / 255.0
        self.texture = np.clip(texture.astype(np.float64), 0.0, 1.0)

    @classmethod
    def from_surface(cls, surface: pygame.Surface) -> TexturedBackground:
        # surfarray is indexed [x, y]
        return cls(np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2)))

    @property
    def size(self) -> tuple[int, int]:
        height, width = self.texture.shape[:2]
        return width, height

    def sample(self, u: ArrayLike, v: ArrayLike) -> np.ndarray:
        width, height = self.size
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64), np.asarray(v, dtype=np.float64))
        columns = np.clip(np.floor(u * width), 0, width - 1).astype(np.intp)
        rows = np.clip(np.floor(v * height), 0, height - 1).astype(np.intp)
        return self.texture[rows, columns]


def build_background(
    mode: BackgroundMode, texture: np.ndarray | None = None
) -> BackgroundSource:
    mode = BackgroundMode(mode)
    if mode is BackgroundMode.WHITE_FILL:
        return WhiteFillBackground()
    if texture is None:
        raise ValueError("Textured background mode requires a texture")
    return TexturedBackground(texture)

from __future__ import annotations

import numpy as np
import pygame
from reactivex.disposable import Disposable

from eyeblink.blink.effect import BlinkEffect
from eyeblink.renderers.blink.provider import BlinkStateProvider
from eyeblink.renderers.blink.state import BlinkState
from eyeblink.utilities.logging import get_logger

logger = get_logger(__name__)


class BlinkRenderer:
    def __init__(
        self,
        effect: BlinkEffect,
        builder: BlinkStateProvider | None = None,
        state: BlinkState | None = None,
    ) -> None:
        if builder is not None and state is not None:
            raise ValueError("BlinkRenderer accepts a builder or state, not both")
        self.effect = effect
        self.builder = builder
        self.state = state or BlinkState()
        self.initialized = False
        self._subscription: Disposable | None = None

    def set_state(self, state: BlinkState) -> None:
        self.state = state

    def initialize(self) -> None:
        if self.builder is not None:
            self._subscription = self.builder.observable().subscribe(
                on_next=self.set_state
            )
        logger.info("Initialized blink renderer at t=%.3fs", self.state.time_seconds)
        self.initialized = True

    def frame(self, width: int, height: int) -> np.ndarray:
        """Composited frame as ``uint8`` RGB with shape ``(height, width, 3)``."""

        rgb = self.effect.render((width, height), self.state.time_seconds)
        return np.rint(np.clip(rgb, 0.0, 1.0) * 255).astype(np.uint8)

    def process(self, window: pygame.Surface) -> None:
        if not self.initialized:
            self.initialize()
        rgb = self.frame(window.get_width(), window.get_height())
        # blit_array expects (w, h, 3)
        pygame.surfarray.blit_array(window, np.transpose(rgb, (1, 0, 2)))

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.initialized = False

"""Tests for drawing the blink effect onto pygame surfaces."""

from __future__ import annotations

import math

import numpy as np
import pygame
import pytest
from reactivex.subject import Subject

from eyeblink.blink.background import WhiteFillBackground
from eyeblink.blink.effect import BlinkEffect
from eyeblink.blink.evaluator import BlinkIntensityEvaluator
from eyeblink.blink.waves import SharpBlinkWave
from eyeblink.renderers.blink import (BlinkRenderer, BlinkState,
                                      BlinkStateProvider)


@pytest.fixture()
def effect() -> BlinkEffect:
    return BlinkEffect(BlinkIntensityEvaluator(SharpBlinkWave()), WhiteFillBackground())


class TestBlinkRenderer:
    def test_open_eye_frame_is_bright_in_center(self, effect: BlinkEffect) -> None:
        window = pygame.Surface((5, 5))
        renderer = BlinkRenderer(effect, state=BlinkState(time_seconds=math.pi / 2))

        renderer.process(window)

        pixels = pygame.surfarray.array3d(window)
        assert pixels.shape == (5, 5, 3)
        assert pixels[2, 2, 0] >= 250
        assert pixels[0, 0, 0] < pixels[2, 2, 0]

    def test_blink_instant_frame_is_black(self, effect: BlinkEffect) -> None:
        window = pygame.Surface((4, 3))
        renderer = BlinkRenderer(effect, state=BlinkState(time_seconds=0.0))

        renderer.process(window)

        assert np.all(pygame.surfarray.array3d(window) == 0)

    def test_frame_orientation_matches_surface(self, effect: BlinkEffect) -> None:
        renderer = BlinkRenderer(effect, state=BlinkState(time_seconds=1.0))

        frame = renderer.frame(7, 3)

        assert frame.shape == (3, 7, 3)
        assert frame.dtype == np.uint8

    def test_follows_provider_until_reset(self, effect: BlinkEffect) -> None:
        ticks: Subject[int] = Subject()
        renderer = BlinkRenderer(effect, builder=BlinkStateProvider(ticks))
        renderer.initialize()

        ticks.on_next(1500)
        assert renderer.state.time_seconds == pytest.approx(1.5)

        renderer.reset()
        ticks.on_next(1500)

        assert renderer.state.time_seconds == pytest.approx(1.5)
        assert renderer.initialized is False

    def test_rejects_builder_and_state(self, effect: BlinkEffect) -> None:
        with pytest.raises(ValueError):
            BlinkRenderer(effect, builder=BlinkStateProvider(Subject()), state=BlinkState())

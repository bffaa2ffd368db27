from __future__ import annotations

import numpy as np
from lagom import Container, Singleton

from eyeblink.blink.background import BackgroundSource, build_background
from eyeblink.blink.config import BlinkConfiguration
from eyeblink.blink.effect import BlinkEffect
from eyeblink.blink.evaluator import BlinkIntensityEvaluator
from eyeblink.blink.waves import BlinkWaveFunction, build_blink_wave
from eyeblink.utilities.logging import get_logger

logger = get_logger(__name__)

RuntimeContainer = Container


def build_runtime_container(
    configuration: BlinkConfiguration | None = None,
    texture: np.ndarray | None = None,
) -> RuntimeContainer:
    """Resolve the configured blink strategies once and register them."""

    configuration = configuration or BlinkConfiguration.from_env()
    logger.info(
        "Resolving blink strategies: blink=%s background=%s",
        configuration.blink_mode,
        configuration.background_mode,
    )

    container = RuntimeContainer()
    container[BlinkConfiguration] = configuration
    container[BlinkWaveFunction] = build_blink_wave(
        configuration.blink_mode, configuration.speed
    )
    container[BackgroundSource] = build_background(
        configuration.background_mode, texture
    )
    container[BlinkIntensityEvaluator] = Singleton(
        lambda c: BlinkIntensityEvaluator(
            c[BlinkWaveFunction], epsilon=c[BlinkConfiguration].wave_epsilon
        )
    )
    container[BlinkEffect] = Singleton(
        lambda c: BlinkEffect(c[BlinkIntensityEvaluator], c[BackgroundSource])
    )
    return container
